# db_cli.py: inventory database CLI
import os, sys, argparse, logging
from typing import List, Optional

from database import DB_FILENAME, InventoryError, StorageError, open_store
from models import User
from services.inventory import InventoryTable, table_row
from services.users import UserManager


def print_rows(rows: List[tuple], headers: List[str]) -> None:
    if not rows:
        print("(no rows)")
        return
    widths = [len(h) for h in headers]
    for r in rows:
        for i, v in enumerate(r):
            widths[i] = max(widths[i], len("" if v is None else str(v)))
    line = " | ".join(h.ljust(widths[i]) for i,h in enumerate(headers))
    print(line)
    print("-+-".join("-"*w for w in widths))
    for r in rows:
        print(" | ".join(("" if v is None else str(v)).ljust(widths[i]) for i,v in enumerate(r)))


def read_statements(path: str) -> List[str]:
    """Lines of an export file with blank lines dropped."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f if line.strip()]


# --------------------
# Commands
# --------------------

def cmd_init(store, args):
    print(f"Database ready: {store.path}")
    print("Tables:", ", ".join(store.database.table_names()))


def cmd_export(store, args):
    statements = store.export_database()
    with open(args.file, "w", encoding="utf-8") as f:
        for s in statements:
            f.write(s + "\n")
    print(f"Exported {len(statements)} statements to {args.file}")


def cmd_import(store, args):
    if not os.path.exists(args.file):
        print(f"Import file not found: {args.file}")
        return 1
    statements = read_statements(args.file)
    count = store.import_database(statements, overwrite=args.overwrite)
    print(f"Imported {count} statements from {args.file}" + (" (overwrite)" if args.overwrite else ""))


def cmd_users(store, args):
    users = UserManager(store).list_users()
    rows = [(u.user_id, u.username, u.first_name, u.last_name, "YES" if u.administrator else "NO")
            for u in users]
    print_rows(rows, ["user_id", "username", "first_name", "last_name", "administrator"])


def cmd_add_user(store, args):
    user = User(
        username=args.username, password=args.password,
        first_name=args.first, last_name=args.last, administrator=args.admin,
    )
    UserManager(store).create_user(user)
    print(f"Created user {user.username} (user_id={user.user_id})")


def cmd_items(store, args):
    inventory = InventoryTable(store)
    objs = inventory.filter(args.filter) if args.filter else inventory.rows()
    keys = ["item_number", "name", "type", "units_in_stock", "unit_cost", "manufacture", "release_date"]
    rows = [tuple(table_row(o)[k] for k in keys) for o in objs]
    print_rows(rows, keys)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Inventory database CLI")
    p.add_argument("--db", default=os.environ.get("INVENTORY_DB", DB_FILENAME),
                   help="database file (default: $INVENTORY_DB or %(default)s)")
    p.add_argument("-v", "--verbose", action="store_true", help="log each database operation")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("init", help="create the database file and tables")
    s.set_defaults(func=cmd_init)

    s = sub.add_parser("export", help="write every row as INSERT statements")
    s.add_argument("file")
    s.set_defaults(func=cmd_export)

    s = sub.add_parser("import", help="run statements from an export file")
    s.add_argument("file")
    s.add_argument("--overwrite", action="store_true", help="empty all tables first")
    s.set_defaults(func=cmd_import)

    s = sub.add_parser("users", help="list users")
    s.set_defaults(func=cmd_users)

    s = sub.add_parser("add-user", help="create a user")
    s.add_argument("username")
    s.add_argument("--password", required=True)
    s.add_argument("--first", required=True)
    s.add_argument("--last", required=True)
    s.add_argument("--admin", action="store_true")
    s.set_defaults(func=cmd_add_user)

    s = sub.add_parser("items", help="list inventory items")
    s.add_argument("--filter", help="regex matched against name and description")
    s.set_defaults(func=cmd_items)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    try:
        store = open_store(args.db)
        return args.func(store, args) or 0
    except StorageError as e:
        print(f"Database error: {e}", file=sys.stderr)
        return 1
    except InventoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

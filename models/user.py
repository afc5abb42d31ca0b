from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class User:
    username: str
    password: str = field(repr=False)
    first_name: str = ""
    last_name: str = ""
    administrator: bool = False
    user_id: int = 0

    def is_valid_password(self, password: str) -> bool:
        return password == self.password

    def __str__(self) -> str:
        return self.username

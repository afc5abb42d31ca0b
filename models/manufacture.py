from dataclasses import dataclass


@dataclass
class Manufacture:
    manufacture_id: int
    name: str

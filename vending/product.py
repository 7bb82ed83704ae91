from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Product:
    """An item that can be stocked in and vended from the machine."""
    name: str
    price: int

    def matches_name(self, query: Optional[str]) -> bool:
        if query is None:
            return False
        return self.name.casefold() == query.casefold()

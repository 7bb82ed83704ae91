from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Optional, Tuple, Union


# -----------------------------
# Denominations
# -----------------------------
class Denominations:
    """Immutable table of coin labels and their values in minor units."""

    def __init__(self, table: Dict[str, int]):
        self._by_label = MappingProxyType(dict(table))
        self._by_value = MappingProxyType({v: k for k, v in table.items()})

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(self._by_label.keys())

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(self._by_label.values())

    def is_valid(self, value) -> bool:
        # minor units are ints only; True == 1 and 20.0 == 20 as dict keys
        if not isinstance(value, int) or isinstance(value, bool):
            return False
        return value in self._by_value

    def label_for(self, value) -> Optional[str]:
        return self._by_value.get(value)

    def parse(self, label: Optional[str]) -> "ParsedCoin":
        """Converts a label such as '£1' or '20p' into a Coin."""
        if not label:
            return NOT_A_COIN
        label = label.strip()
        # '50P' is accepted as '50p'
        if label[-1:] in ("p", "P"):
            label = label[:-1] + "p"
        value = self._by_label.get(label)
        if value is None:
            return NOT_A_COIN
        return Coin(value)

    def __repr__(self):
        return f"Denominations({dict(self._by_label)!r})"


# Canonical system: greedy change-making is exact for this table.
STERLING = Denominations({
    "£2": 200,
    "£1": 100,
    "50p": 50,
    "20p": 20,
    "10p": 10,
    "5p": 5,
    "2p": 2,
    "1p": 1,
})


# -----------------------------
# Coin
# -----------------------------
@dataclass(frozen=True, order=True)
class Coin:
    value: int

    def is_valid(self, denominations: Denominations = STERLING) -> bool:
        return denominations.is_valid(self.value)

    def label(self, denominations: Denominations = STERLING) -> Optional[str]:
        return denominations.label_for(self.value)


class NotACoin:
    """Result of parsing a label that names no denomination."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NOT_A_COIN"


NOT_A_COIN = NotACoin()

ParsedCoin = Union[Coin, NotACoin]


def parse_coin(label: Optional[str], denominations: Denominations = STERLING) -> ParsedCoin:
    return denominations.parse(label)

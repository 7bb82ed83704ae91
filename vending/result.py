from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .coin import STERLING, Coin, Denominations
from .product import Product


class PurchaseError(Enum):
    OUT_OF_STOCK = "out_of_stock"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    INSUFFICIENT_CHANGE = "insufficient_change"


@dataclass(frozen=True)
class PurchaseResult:
    """
    Outcome of a purchase attempt.

    A successful result carries the vended product and the coins returned as
    change (possibly none). A failed result carries only the error.
    Amounts are raw minor units; rendering is left to the caller.
    """
    vended_product: Optional[Product] = None
    change: Tuple[Coin, ...] = ()
    error: Optional[PurchaseError] = None

    @classmethod
    def success(cls, product: Product, change: Sequence[Coin] = ()) -> "PurchaseResult":
        return cls(vended_product=product, change=tuple(change))

    @classmethod
    def failure(cls, error: PurchaseError) -> "PurchaseResult":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def vended_product_name(self) -> Optional[str]:
        if self.vended_product is None:
            return None
        return self.vended_product.name

    @property
    def has_change(self) -> bool:
        return len(self.change) > 0

    @property
    def total_change(self) -> int:
        return sum(coin.value for coin in self.change)

    def change_labels(self, denominations: Denominations = STERLING) -> List[str]:
        return [coin.label(denominations) for coin in self.change]

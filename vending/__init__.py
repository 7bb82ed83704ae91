from .coin import NOT_A_COIN, STERLING, Coin, Denominations, NotACoin, parse_coin
from .machine import Machine, make_change
from .product import Product
from .result import PurchaseError, PurchaseResult

__all__ = [
    "Coin",
    "Denominations",
    "Machine",
    "NOT_A_COIN",
    "NotACoin",
    "Product",
    "PurchaseError",
    "PurchaseResult",
    "STERLING",
    "make_change",
    "parse_coin",
]

import logging
from typing import Iterable, List, Optional, Tuple

from .coin import STERLING, Coin, Denominations
from .product import Product
from .result import PurchaseError, PurchaseResult

logger = logging.getLogger(__name__)


def make_change(amount: int, coins: Iterable[Coin]) -> Optional[List[Coin]]:
    """
    Picks coins adding up to `amount`, largest first.

    The pool is walked once in descending order; a coin is taken whenever it
    still fits in what is left. There is no backtracking, so an exact answer
    is only guaranteed for canonical coin systems such as STERLING.
    Returns None when the walk ends with something left over.
    """
    remaining = amount
    selected = []

    for coin in sorted(coins, reverse=True):
        if coin.value > remaining:
            continue
        selected.append(coin)
        remaining -= coin.value

    if remaining != 0:
        return None
    return selected


class Machine:
    """
    The vending machine's transaction engine.

    It owns three stores: the products in stock, the change reserve (coins it
    may hand back) and the coins inserted by the current user, which make up
    their balance. After a purchase the inserted coins join the change
    reserve.

    Not safe for concurrent use; callers must serialise access.
    """

    def __init__(self, products: Iterable[Product] = (), change: Iterable[Coin] = (),
                 denominations: Denominations = STERLING):
        self.denominations = denominations
        self._stock: List[Product] = []
        self._reserve: List[Coin] = []
        self._inserted: List[Coin] = []
        self.reset_stock(products)
        self.reset_change(change)

    # -----------------------------
    # Read access
    # -----------------------------
    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._stock)

    @property
    def change(self) -> Tuple[Coin, ...]:
        return tuple(self._reserve)

    @property
    def inserted_coins(self) -> Tuple[Coin, ...]:
        return tuple(self._inserted)

    @property
    def balance(self) -> int:
        return sum(coin.value for coin in self._inserted)

    # -----------------------------
    # Resets
    # -----------------------------
    def reset_stock(self, products: Iterable[Product]):
        self._stock = [p for p in products if p is not None]
        logger.debug("Stock reset to %d products", len(self._stock))

    def reset_change(self, coins: Iterable[Coin]):
        self._reserve = [
            c for c in coins
            if isinstance(c, Coin) and c.is_valid(self.denominations)
        ]
        logger.debug("Change reset to %d coins", len(self._reserve))

    # -----------------------------
    # Transactions
    # -----------------------------
    def insert_coin(self, coin) -> bool:
        """Adds a coin to the balance. NOT_A_COIN and invalid coins are refused."""
        if not isinstance(coin, Coin) or not coin.is_valid(self.denominations):
            logger.debug("Refused coin %r", coin)
            return False
        self._inserted.append(coin)
        logger.debug("Inserted %r, balance now %d", coin, self.balance)
        return True

    def purchase(self, product_name: str) -> PurchaseResult:
        index = self._cheapest_match(product_name)
        if index is None:
            return self._fail(product_name, PurchaseError.OUT_OF_STOCK)

        product = self._stock[index]
        balance = self.balance
        if balance < product.price:
            return self._fail(product_name, PurchaseError.INSUFFICIENT_BALANCE)

        change = make_change(balance - product.price, self._inserted + self._reserve)
        if change is None:
            return self._fail(product_name, PurchaseError.INSUFFICIENT_CHANGE)

        # Nothing below can fail, so the purchase commits as a whole.
        del self._stock[index]
        self._reserve.extend(self._inserted)
        self._inserted.clear()
        for coin in change:
            del self._reserve[self._reserve.index(coin)]

        logger.debug("Vended %s for %d, returned %d in %d coins",
                     product.name, product.price, balance - product.price, len(change))
        return PurchaseResult.success(product, change)

    def _cheapest_match(self, name: str) -> Optional[int]:
        """Index of the cheapest product called `name`; first in stock wins ties."""
        best = None
        for i, product in enumerate(self._stock):
            if not product.matches_name(name):
                continue
            if best is None or product.price < self._stock[best].price:
                best = i
        return best

    def _fail(self, product_name: str, error: PurchaseError) -> PurchaseResult:
        logger.debug("Purchase of %r failed: %s", product_name, error.value)
        return PurchaseResult.failure(error)

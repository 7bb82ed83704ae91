import json
import logging
import os
from typing import List, Optional

from .coin import STERLING, Coin, Denominations
from .product import Product

logger = logging.getLogger(__name__)


# Stock and change used when no config file is given
DEFAULT_PATH = os.path.join(os.path.dirname(__file__), "data", "initial.json")


class ConfigError(Exception):
    pass


class ConfigLoader:
    """
    Builds the machine's initial products and change from a JSON document.

    The file is read again on every call, so reloading the machine picks up
    any edits made while it runs.
    """

    def __init__(self, path: Optional[str] = None, denominations: Denominations = STERLING):
        self.path = path or DEFAULT_PATH
        self.denominations = denominations

    def initial_products(self) -> List[Product]:
        products = []
        for name, details in self._section("stock").items():
            if not isinstance(details, dict):
                raise ConfigError(f"Invalid stock entry for {name} in config file: {details!r}")
            price = self._positive_int(name, details.get("price"), "price")
            quantity = self._positive_int(name, details.get("quantity"), "quantity")
            products.extend(Product(name=name, price=price) for _ in range(quantity))
        return products

    def initial_change(self) -> List[Coin]:
        coins = []
        for label, raw_quantity in self._section("change").items():
            quantity = self._positive_int(label, raw_quantity, "quantity")
            coin = self.denominations.parse(label)
            if not coin:
                logger.warning("Ignoring unknown coin %r in config file", label)
                continue
            coins.extend(coin for _ in range(quantity))
        return coins

    def _load(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {self.path}")
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {self.path} is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {self.path} must contain a JSON object")
        logger.debug("Loaded config from %s", self.path)
        return data

    def _section(self, key: str) -> dict:
        section = self._load().get(key) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"'{key}' in config file must be an object")
        return section

    @staticmethod
    def _positive_int(name, raw_value, field) -> int:
        try:
            value = int(raw_value)
        except (TypeError, ValueError):
            value = 0
        if value > 0:
            return value
        raise ConfigError(
            f"Invalid {field} for {name} in config file: {raw_value}. Must be positive integer."
        )

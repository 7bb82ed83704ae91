"""Shared fixtures for the vending machine tests."""

import pytest

from vending.coin import Coin
from vending.machine import Machine
from vending.product import Product


@pytest.fixture
def empty_machine():
    """Machine with no stock and no change."""
    return Machine()


@pytest.fixture
def stocked_machine():
    """Machine loaded like the default config."""
    products = (
        [Product("Pepsi", 50)] * 2
        + [Product("Coke", 60)] * 3
        + [Product("Banana", 30)] * 4
    )
    change = [Coin(v) for v in [200, 100, 50, 20, 10, 5, 2, 1] for _ in range(5)]
    return Machine(products=products, change=change)

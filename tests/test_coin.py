"""Tests for coins, the denomination table and coin-label parsing."""

import pytest

from vending.coin import NOT_A_COIN, STERLING, Coin, Denominations, NotACoin, parse_coin

VALID_VALUES = [1, 2, 5, 10, 20, 50, 100, 200]


class TestCoin:

    @pytest.mark.parametrize("value", VALID_VALUES)
    def test_valid_denominations(self, value):
        assert Coin(value).is_valid()

    @pytest.mark.parametrize("value", [-1, 0, 3, 21, 25, 202, 500])
    def test_invalid_values_construct_but_are_invalid(self, value):
        coin = Coin(value)
        assert coin.value == value
        assert not coin.is_valid()

    @pytest.mark.parametrize("value", [True, False, 20.0, 50.0, "20", None])
    def test_non_integer_values_are_invalid(self, value):
        assert not Coin(value).is_valid()
        assert not STERLING.is_valid(value)

    def test_equality_and_ordering_by_value(self):
        assert Coin(20) == Coin(20)
        assert Coin(10) < Coin(20)
        assert sorted([Coin(5), Coin(200), Coin(50)]) == [Coin(5), Coin(50), Coin(200)]

    def test_coin_is_immutable(self):
        with pytest.raises(AttributeError):
            Coin(20).value = 50

    def test_label(self):
        assert Coin(200).label() == "£2"
        assert Coin(50).label() == "50p"
        assert Coin(3).label() is None

    def test_validity_follows_injected_table(self):
        euro = Denominations({"€2": 200, "€1": 100, "50c": 50})
        assert Coin(100).is_valid(euro)
        assert not Coin(20).is_valid(euro)


class TestDenominations:

    def test_sterling_table(self):
        assert sorted(STERLING.values) == VALID_VALUES
        assert STERLING.labels == ("£2", "£1", "50p", "20p", "10p", "5p", "2p", "1p")

    def test_table_is_read_only(self):
        table = {"£1": 100}
        denominations = Denominations(table)
        table["£5"] = 500
        assert denominations.values == (100,)

    def test_label_for(self):
        assert STERLING.label_for(100) == "£1"
        assert STERLING.label_for(7) is None


class TestParseCoin:

    @pytest.mark.parametrize("label, value", [
        ("£2", 200), ("£1", 100), ("50p", 50), ("20p", 20),
        ("10p", 10), ("5p", 5), ("2p", 2), ("1p", 1),
    ])
    def test_known_labels(self, label, value):
        assert parse_coin(label) == Coin(value)

    def test_upper_case_pence_and_whitespace(self):
        assert parse_coin(" 50P ") == Coin(50)

    @pytest.mark.parametrize("label", ["$1", "£3", "3p", "£", "p", "fifty", "", None])
    def test_unknown_labels(self, label):
        assert parse_coin(label) is NOT_A_COIN

    def test_not_a_coin_is_a_falsy_singleton(self):
        assert NotACoin() is NOT_A_COIN
        assert not NOT_A_COIN
        assert not isinstance(NOT_A_COIN, Coin)

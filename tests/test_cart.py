from decimal import Decimal

import pytest

from models.cart import Cart
from models.item import InvalidItemError, Item


def test_item_price_is_coerced_to_exact_decimal():
    assert Item("ipd", 549.99).price == Decimal("549.99")
    assert Item("vga", 30).price == Decimal("30")
    assert Item("atv", "109.50").price == Decimal("109.50")


def test_items_compare_structurally():
    assert Item("atv", 109.5) == Item("atv", "109.5")
    assert Item("atv", 109.5) != Item("vga", 109.5)


def test_item_is_immutable():
    item = Item("atv", 109.5)
    with pytest.raises(AttributeError):
        item.price = Decimal("1")


def test_item_rejects_non_numeric_price():
    with pytest.raises(InvalidItemError):
        Item("atv", "free")


def test_scan_preserves_order(atv, ipd, vga):
    cart = Cart()
    cart.scan(vga)
    cart.scan(atv)
    cart.scan(ipd)
    cart.scan(atv)

    assert [it.sku for it in cart.items] == ["vga", "atv", "ipd", "atv"]
    assert len(cart) == 4


def test_items_is_a_snapshot(atv, vga):
    cart = Cart()
    cart.scan(atv)
    snapshot = cart.items
    cart.scan(vga)

    assert snapshot == (atv,)
    assert isinstance(snapshot, tuple)
    assert list(cart) == [atv, vga]


def test_clear_is_idempotent(atv):
    cart = Cart()
    cart.scan(atv)
    cart.clear()
    cart.clear()

    assert cart.items == ()
    assert len(cart) == 0


@pytest.mark.parametrize("bad", [
    Item("", 10),
    Item("   ", 10),
    Item("atv", -1),
    Item("atv", "NaN"),
    {"sku": "atv", "price": 109.5},
])
def test_scan_rejects_malformed_items(bad):
    cart = Cart()
    with pytest.raises(InvalidItemError):
        cart.scan(bad)
    assert len(cart) == 0


def test_invalid_item_error_is_a_value_error():
    assert issubclass(InvalidItemError, ValueError)


def test_zero_price_is_allowed():
    cart = Cart()
    cart.scan(Item("bag", 0))
    assert len(cart) == 1

import logging
from decimal import Decimal

import pytest

from models.item import Item
from services.checkout_service import Checkout
from services.pricing_service import apple_tv_bulk_discount, ipad_bulk_discount


@pytest.fixture
def atv():
    return Item("atv", 109.5)


@pytest.fixture
def ipd():
    return Item("ipd", 549.99)


@pytest.fixture
def vga():
    return Item("vga", 30)


@pytest.fixture
def mbp():
    return Item("mbp", Decimal("1399.99"))


@pytest.fixture
def checkout():
    return Checkout()


@pytest.fixture
def atv_rule():
    return apple_tv_bulk_discount()


@pytest.fixture
def ipd_rule():
    return ipad_bulk_discount()


@pytest.fixture(autouse=True)
def _reset_pos_logger():
    """Drop handlers setup_logger() attached so tests don't leak file handles."""
    yield
    logger = logging.getLogger("pos")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)

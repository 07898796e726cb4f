# models/cart.py
import logging

from models.item import InvalidItemError, Item

logger = logging.getLogger("pos.cart")


# Cart model holding the items scanned for the current checkout,
# in scan order.
class Cart:
    def __init__(self):
        self._items: list[Item] = []

    @property
    def items(self) -> tuple[Item, ...]:
        # Snapshot; rules and callers can't mutate the cart through it.
        return tuple(self._items)

    def scan(self, item: Item) -> None:
        if not isinstance(item, Item):
            raise InvalidItemError(f"Expected an Item, got {type(item).__name__}.")
        if not isinstance(item.sku, str) or not item.sku.strip():
            raise InvalidItemError("The SKU must be a non-empty string.")
        if not item.price.is_finite() or item.price < 0:
            raise InvalidItemError(f"The price of {item.sku} must be a non-negative number.")
        self._items.append(item)
        logger.debug("scanned %s @ %s (%d in cart)", item.sku, item.price, len(self._items))

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self.items)

# models/item.py
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from utils.money import to_decimal


class InvalidItemError(ValueError):
    pass


# Item model: one physical unit scanned at the till.
@dataclass(frozen=True)
class Item:
    sku: str
    price: Decimal

    def __post_init__(self):
        try:
            price = to_decimal(self.price)
        except (InvalidOperation, TypeError) as e:
            raise InvalidItemError(f"Invalid price for {self.sku!r}: {self.price!r}") from e
        # frozen dataclass, so bypass __setattr__ for the coerced price
        object.__setattr__(self, "price", price)

# models/product.py
from dataclasses import dataclass
from decimal import Decimal

from models.item import Item
from utils.money import to_decimal


# Product model: a catalog entry the till can turn into scanned items.
@dataclass
class Product:
    sku: str
    name: str
    price: Decimal

    def __post_init__(self):
        self.price = to_decimal(self.price)

    def to_item(self) -> Item:
        return Item(self.sku, self.price)

# data/repository.py
import copy
import json
import logging
from pathlib import Path

from models.product import Product

logger = logging.getLogger("pos.repository")

DEFAULT_PRODUCTS = [
    {"sku": "atv", "name": "Apple TV", "price": "109.50"},
    {"sku": "ipd", "name": "Super iPad", "price": "549.99"},
    {"sku": "mbp", "name": "MacBook Pro", "price": "1399.99"},
    {"sku": "vga", "name": "VGA adapter", "price": "30.00"},
]

DEFAULT_PROMOTIONS = {
    "rule_policy": "last_wins",
    "rules": [
        {"type": "buy_n_get_one_free", "id": "appleTVBulkDiscount", "sku": "atv", "n": 3},
        {"type": "bulk_price", "id": "ipadBulkDiscount", "sku": "ipd",
         "min_qty": 4, "bulk_price": "499.99"},
    ],
}


class DataRepository:
    # Read-only access to the catalog and promotions config.
    # Cart and rule state is never written back.

    def __init__(self, storage_dir="data/storage"):
        self.storage_dir = Path(storage_dir)

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str):
        # Load JSON from disk. Missing, empty or unreadable files give None
        # and the caller falls back to its defaults.
        path = self._file_path(filename)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return None
                return json.loads(text)
        except (OSError, ValueError) as e:
            logger.warning("could not read %s, using defaults: %s", path, e)
            return None

    def get_products(self) -> list[Product]:
        data = self._read_json("products.json")
        if not isinstance(data, list):
            data = DEFAULT_PRODUCTS
        return [Product(p["sku"], p.get("name", p["sku"]), p["price"]) for p in data]

    def get_products_map(self) -> dict[str, Product]:
        return {p.sku: p for p in self.get_products()}

    def get_promotions(self) -> dict:
        # Returns promotions configuration.
        # If file missing or bad, return the default structure.
        data = self._read_json("promotions.json")
        if not isinstance(data, dict):
            data = {}

        defaults = copy.deepcopy(DEFAULT_PROMOTIONS)
        rules = data.get("rules", defaults["rules"])
        if not isinstance(rules, list) or not all(isinstance(r, dict) for r in rules):
            logger.warning("promotions.json \"rules\" is not a list of objects, using defaults")
            rules = defaults["rules"]

        return {
            "rule_policy": data.get("rule_policy", defaults["rule_policy"]),
            "rules": rules,
        }

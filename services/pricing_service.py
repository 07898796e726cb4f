# services/pricing_service.py

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Callable, Dict, List, Sequence

from models.item import Item
from utils.money import ZERO, sum_prices, to_decimal

logger = logging.getLogger("pos.pricing")


class UnknownRuleTypeError(ValueError):
    pass


class InvalidRuleConfigError(ValueError):
    pass


class PricingRule(ABC):
    # Abstract base class for all pricing rules.
    # A rule prices the WHOLE cart it is given (base prices plus its own
    # discount) and must not depend on any other rule having run first.
    # apply() must be pure: same items in, same total out.

    def __init__(self, rule_id: str):
        if not rule_id:
            raise ValueError("A pricing rule needs a non-empty id.")
        self.rule_id = rule_id

    @abstractmethod
    def apply(self, items: Sequence[Item]) -> Decimal:
        pass

    def __repr__(self):
        return f"{type(self).__name__}({self.rule_id!r})"


class FunctionRule(PricingRule):
    # Wraps a plain callable (items -> total) so closures can be registered.

    def __init__(self, rule_id: str, func: Callable[[Sequence[Item]], Any]):
        super().__init__(rule_id)
        self.func = func

    def apply(self, items):
        return to_decimal(self.func(items))


class BuyNGetOneFreeRule(PricingRule):
    # Example: "buy 3 Apple TVs, pay for 2".
    # Every n-th unit of `sku` is free; the free unit is valued at the price
    # of the first unit of that sku in scan order.

    def __init__(self, rule_id: str, sku: str, n: int):
        super().__init__(rule_id)
        if n < 1:
            raise ValueError("n must be a positive number.")
        self.sku = sku
        self.n = n

    def apply(self, items):
        matching = [it for it in items if it.sku == self.sku]
        base = sum_prices(items)
        if not matching:
            return base

        free_units = len(matching) // self.n
        discount = free_units * matching[0].price
        return max(ZERO, base - discount)


class BulkPriceRule(PricingRule):
    # Example: "more than 4 iPads -> 499.99 each".
    # When the cart holds more than min_qty units of `sku`, every unit of
    # that sku is charged bulk_price instead of its scanned price.
    # At or below min_qty the scanned price stands, and no further per-unit
    # discount is taken on top of bulk_price: 2 Apple TVs + 5 iPads
    # come to 2718.95, not 2468.95.

    def __init__(self, rule_id: str, sku: str, min_qty: int, bulk_price):
        super().__init__(rule_id)
        if min_qty < 0:
            raise ValueError("min_qty cannot be negative.")
        self.sku = sku
        self.min_qty = min_qty
        self.bulk_price = to_decimal(bulk_price)
        if self.bulk_price < 0:
            raise ValueError("bulk_price cannot be negative.")

    def apply(self, items):
        qty = sum(1 for it in items if it.sku == self.sku)
        if qty <= self.min_qty:
            return sum_prices(items)

        total = ZERO
        for it in items:
            total += self.bulk_price if it.sku == self.sku else it.price
        return max(ZERO, total)


def apple_tv_bulk_discount() -> BuyNGetOneFreeRule:
    # 3 for 2 on Apple TVs.
    return BuyNGetOneFreeRule("appleTVBulkDiscount", sku="atv", n=3)


def ipad_bulk_discount() -> BulkPriceRule:
    # Over 4 iPads, each drops to 499.99.
    return BulkPriceRule("ipadBulkDiscount", sku="ipd", min_qty=4, bulk_price="499.99")


RULE_TYPES = {
    "buy_n_get_one_free": lambda cfg: BuyNGetOneFreeRule(
        cfg["id"], sku=cfg["sku"], n=int(cfg["n"])
    ),
    "bulk_price": lambda cfg: BulkPriceRule(
        cfg["id"], sku=cfg["sku"], min_qty=int(cfg["min_qty"]), bulk_price=cfg["bulk_price"]
    ),
}


def build_rules(promotions: Dict[str, Any]) -> List[PricingRule]:
    """
    Build rule objects from a promotions config, e.g.

        {"rules": [
            {"type": "buy_n_get_one_free", "id": "appleTVBulkDiscount", "sku": "atv", "n": 3},
            {"type": "bulk_price", "id": "ipadBulkDiscount", "sku": "ipd",
             "min_qty": 4, "bulk_price": "499.99"}
        ]}

    Rules come back in config order, which is the order they should be
    registered in.
    """
    rules: List[PricingRule] = []
    entries = promotions.get("rules", [])
    if not isinstance(entries, list):
        raise InvalidRuleConfigError("Promotions \"rules\" must be a list.")

    for cfg in entries:
        if not isinstance(cfg, dict):
            raise InvalidRuleConfigError(f"Pricing rule config must be an object, got {cfg!r}")
        rule_type = cfg.get("type")
        if not isinstance(rule_type, str) or rule_type not in RULE_TYPES:
            raise UnknownRuleTypeError(f"Unknown pricing rule type: {rule_type!r}")
        try:
            rule = RULE_TYPES[rule_type](cfg)
        except KeyError as e:
            raise InvalidRuleConfigError(f"{rule_type} rule is missing {e.args[0]!r}") from e
        except (TypeError, ArithmeticError) as e:
            raise InvalidRuleConfigError(f"Bad {rule_type} rule config {cfg!r}: {e}") from e
        logger.debug("built %r from promotions", rule)
        rules.append(rule)
    return rules

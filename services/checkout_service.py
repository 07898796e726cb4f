# services/checkout_service.py

import logging
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable

from models.cart import Cart
from models.item import Item
from services.pricing_service import PricingRule
from utils.money import ZERO, round_money, sum_prices, to_decimal

logger = logging.getLogger("pos.checkout")


class RulePolicy(str, Enum):
    # LAST_WINS: each rule replaces the running total, so only the last
    # registered rule counts. This is how totals have always been computed.
    # CUMULATIVE: alternate mode, every rule's discount off the base total
    # is added up.
    LAST_WINS = "last_wins"
    CUMULATIVE = "cumulative"


class Checkout:
    def __init__(self, pricing_rules: Iterable[PricingRule] = (), policy=RulePolicy.LAST_WINS):
        self.cart = Cart()
        self.policy = RulePolicy(policy)
        # rule_id -> rule, enumerated in insertion order
        self._rules: Dict[str, PricingRule] = {}
        for rule in pricing_rules:
            self.add_pricing_rule(rule)

    @property
    def rules(self) -> tuple:
        return tuple(self._rules.values())

    def has_rule(self, rule_id: str) -> bool:
        return rule_id in self._rules

    def scan(self, item: Item) -> None:
        self.cart.scan(item)

    def clear_items(self) -> None:
        self.cart.clear()

    def add_pricing_rule(self, rule: PricingRule) -> None:
        # Same id replaces the old rule (it keeps its place in the order).
        replaced = self.has_rule(rule.rule_id)
        self._rules[rule.rule_id] = rule
        logger.info("%s pricing rule %s", "replaced" if replaced else "added", rule.rule_id)

    def remove_pricing_rule(self, rule_id: str) -> None:
        if self._rules.pop(rule_id, None) is not None:
            logger.info("removed pricing rule %s", rule_id)

    def base_total(self) -> Decimal:
        return sum_prices(self.cart.items)

    def total(self) -> Decimal:
        items = self.cart.items
        base = sum_prices(items)

        if self.policy is RulePolicy.CUMULATIVE:
            discount = ZERO
            for rule in self._rules.values():
                discount += base - self._apply(rule, items)
            total = max(ZERO, base - discount)
        else:
            total = base
            for rule in self._rules.values():
                total = self._apply(rule, items)

        total = round_money(total)
        logger.debug(
            "total for %d item(s): base=%s total=%s policy=%s",
            len(items), base, total, self.policy.value,
        )
        return total

    def _apply(self, rule: PricingRule, items) -> Decimal:
        try:
            return to_decimal(rule.apply(items))
        except Exception:
            logger.exception("pricing rule %s failed", rule.rule_id)
            raise

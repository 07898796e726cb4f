# main.py
import sys

from data.repository import DataRepository
from services.checkout_service import Checkout
from services.pricing_service import build_rules
from utils.logger import setup_logger

# The two sample baskets, as scanned at the till.
SAMPLE_BASKETS = [
    ["atv", "atv", "atv", "vga"],
    ["atv", "ipd", "ipd", "atv", "ipd", "ipd", "ipd"],
]


def build_checkout(repo: DataRepository) -> Checkout:
    promo = repo.get_promotions()
    return Checkout(build_rules(promo), policy=promo["rule_policy"])


def run_demo(repo: DataRepository, baskets=SAMPLE_BASKETS) -> list:
    """
    Scan each basket on one checkout (clearing between baskets) and
    return the totals in order.
    """
    products = repo.get_products_map()
    co = build_checkout(repo)

    totals = []
    for skus in baskets:
        co.clear_items()
        for sku in skus:
            if sku not in products:
                raise ValueError(f"SKU not found: {sku}")
            co.scan(products[sku].to_item())
        totals.append(co.total())
    return totals


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    storage_dir = argv[0] if argv else "data/storage"

    logger = setup_logger()
    repo = DataRepository(storage_dir)

    try:
        totals = run_demo(repo)
    except ValueError as e:
        logger.error("demo failed: %s", e)
        return 1

    for skus, total in zip(SAMPLE_BASKETS, totals):
        logger.info("basket %s -> %s", " ".join(skus), total)
        print(f"SKUs Scanned: {', '.join(skus)}")
        print(f"Total expected: ${total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Default taxonomy written into every newly registered restaurant."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.orm import Session

from app.services.category_service import create_cat_group, create_category
from app.services.meal_period_service import create_meal_period, create_meal_period_category
from app.services.sales_service import create_default_sale

logger = logging.getLogger(__name__)

BRUNCH = "Brunch"
LUNCH = "Lunch"
DINNER = "Dinner"

FOOD_GROUP = "Food & Non-Alcoholic Beverages"
ALCOHOL_GROUP = "Alcoholic Beverages"
RETAIL_GROUP = "Retail"

FOOD = "Food"
NA_BEVERAGES = "Non-Alcoholic Beverages"
BEER = "Beer"
LIQUOR = "Liquor"
WINE = "Wine"
RETAIL = "Retail"

MEAL_PERIODS: tuple[tuple[str, str | None], ...] = (
    (BRUNCH, "Only on the weekend; replaced by Lunch during the week."),
    (LUNCH, "Only on weekdays; replaced by Brunch on the weekend."),
    (DINNER, None),
)

CAT_GROUPS: tuple[str, ...] = (FOOD_GROUP, ALCOHOL_GROUP, RETAIL_GROUP)

# (category, group, cost of goods sold as a fraction of sales)
CATEGORIES: tuple[tuple[str, str, Decimal], ...] = (
    (FOOD, FOOD_GROUP, Decimal("0.35")),
    (NA_BEVERAGES, FOOD_GROUP, Decimal("0.10")),
    (BEER, ALCOHOL_GROUP, Decimal("0.15")),
    (LIQUOR, ALCOHOL_GROUP, Decimal("0.20")),
    (WINE, ALCOHOL_GROUP, Decimal("0.30")),
    (RETAIL, RETAIL_GROUP, Decimal("0.25")),
)

# (day id, 1 = Monday, meal period, total)
DEFAULT_SALES: tuple[tuple[int, str, Decimal], ...] = (
    (3, DINNER, Decimal("6000")),
    (4, DINNER, Decimal("8000")),
    (5, LUNCH, Decimal("5000")),
    (5, DINNER, Decimal("10000")),
    (6, BRUNCH, Decimal("8000")),
    (6, DINNER, Decimal("10000")),
    (7, BRUNCH, Decimal("6000")),
    (7, DINNER, Decimal("4000")),
)

# Each meal period's shares sum to 1.00.
ALLOCATIONS: dict[str, dict[str, Decimal]] = {
    BRUNCH: {
        BEER: Decimal("0.15"),
        FOOD: Decimal("0.50"),
        LIQUOR: Decimal("0.15"),
        NA_BEVERAGES: Decimal("0.05"),
        WINE: Decimal("0.15"),
    },
    DINNER: {
        BEER: Decimal("0.10"),
        FOOD: Decimal("0.50"),
        LIQUOR: Decimal("0.10"),
        NA_BEVERAGES: Decimal("0.05"),
        WINE: Decimal("0.25"),
    },
    LUNCH: {
        BEER: Decimal("0.10"),
        FOOD: Decimal("0.65"),
        LIQUOR: Decimal("0.05"),
        NA_BEVERAGES: Decimal("0.10"),
        WINE: Decimal("0.10"),
    },
}


@dataclass(frozen=True)
class BootstrapSummary:
    meal_periods: int
    cat_groups: int
    categories: int
    default_sales: int
    meal_period_categories: int


def bootstrap_restaurant(db: Session, restaurant_id: int) -> BootstrapSummary:
    """Write the default taxonomy for a restaurant.

    Rows are only flushed; the caller owns the transaction, so a failure here
    rolls back together with the restaurant itself.
    """
    meal_period_ids: dict[str, int] = {}
    for name, notes in MEAL_PERIODS:
        meal_period_ids[name] = create_meal_period(db, restaurant_id, name, notes).id

    cat_group_ids: dict[str, int] = {}
    for name in CAT_GROUPS:
        cat_group_ids[name] = create_cat_group(db, restaurant_id, name).id

    category_ids: dict[str, int] = {}
    for name, group, cogs_percent in CATEGORIES:
        category_ids[name] = create_category(
            db, restaurant_id, name, cogs_percent, cat_group_id=cat_group_ids[group]
        ).id

    for day_id, meal_period, total in DEFAULT_SALES:
        create_default_sale(db, restaurant_id, meal_period_ids[meal_period], day_id, total)

    allocation_count = 0
    for meal_period, shares in ALLOCATIONS.items():
        for category, share in shares.items():
            create_meal_period_category(
                db, restaurant_id, meal_period_ids[meal_period], category_ids[category], share
            )
            allocation_count += 1

    summary = BootstrapSummary(
        meal_periods=len(meal_period_ids),
        cat_groups=len(cat_group_ids),
        categories=len(category_ids),
        default_sales=len(DEFAULT_SALES),
        meal_period_categories=allocation_count,
    )
    logger.info("[BOOTSTRAP] Seeded restaurant_id=%s: %s", restaurant_id, summary)
    return summary

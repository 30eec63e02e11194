"""Category group and category service operations."""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import BadRequestError
from app.db.session import transaction
from app.models.category import Category, CategoryGroup
from app.schemas.category import CategoryCreate, CategoryGroupCreate, CategoryGroupUpdate, CategoryUpdate
from app.services.access import require_admin, require_member
from app.services.consistency import cat_group_and_restaurant_match, category_and_group_match
from app.services.existence import check_cat_group_exists, check_category_exists
from app.services.store import apply_updates


def create_cat_group(db: Session, restaurant_id: int, name: str, notes: str | None = None) -> CategoryGroup:
    """Add a category group row and flush it; the caller commits."""
    cat_group = CategoryGroup(restaurant_id=restaurant_id, name=name, notes=notes)
    db.add(cat_group)
    db.flush()
    return cat_group


def create_category(
    db: Session,
    restaurant_id: int,
    name: str,
    cogs_percent: Decimal,
    cat_group_id: int | None = None,
    notes: str | None = None,
) -> Category:
    """Add a category row and flush it; the caller commits."""
    category = Category(
        restaurant_id=restaurant_id,
        name=name,
        cogs_percent=cogs_percent,
        cat_group_id=cat_group_id,
        notes=notes,
    )
    db.add(category)
    db.flush()
    return category


def get_cat_group_by_name(db: Session, restaurant_id: int, name: str) -> CategoryGroup | None:
    """Return the restaurant's category group with this name, if any."""
    return db.scalar(
        select(CategoryGroup).where(CategoryGroup.restaurant_id == restaurant_id, CategoryGroup.name == name).limit(1)
    )


def get_category_by_name(db: Session, restaurant_id: int, name: str) -> Category | None:
    """Return the restaurant's category with this name, if any."""
    return db.scalar(select(Category).where(Category.restaurant_id == restaurant_id, Category.name == name).limit(1))


def _ensure_cat_group_name_available(db: Session, restaurant_id: int, name: str) -> None:
    if get_cat_group_by_name(db, restaurant_id, name) is not None:
        raise BadRequestError(f"Restaurant {restaurant_id} already has a category group named {name}.")


def _ensure_category_name_available(db: Session, restaurant_id: int, name: str) -> None:
    if get_category_by_name(db, restaurant_id, name) is not None:
        raise BadRequestError(f"Restaurant {restaurant_id} already has a category named {name}.")


# Category groups


def list_cat_groups(db: Session, actor_id: int, restaurant_id: int) -> list[CategoryGroup]:
    require_member(db, restaurant_id, actor_id)
    return list(
        db.scalars(select(CategoryGroup).where(CategoryGroup.restaurant_id == restaurant_id).order_by(CategoryGroup.id))
    )


def register_cat_group(db: Session, actor_id: int, payload: CategoryGroupCreate) -> CategoryGroup:
    with transaction(db):
        require_admin(db, payload.restaurant_id, actor_id)
        _ensure_cat_group_name_available(db, payload.restaurant_id, payload.name)
        cat_group = create_cat_group(db, payload.restaurant_id, payload.name, payload.notes)
    return cat_group


def get_cat_group(db: Session, actor_id: int, cat_group_id: int) -> CategoryGroup:
    cat_group = check_cat_group_exists(db, cat_group_id)
    require_member(db, cat_group.restaurant_id, actor_id)
    return cat_group


def update_cat_group(db: Session, actor_id: int, cat_group_id: int, payload: CategoryGroupUpdate) -> CategoryGroup:
    with transaction(db):
        cat_group = check_cat_group_exists(db, cat_group_id)
        require_admin(db, cat_group.restaurant_id, actor_id)
        if payload.name is not None and payload.name != cat_group.name:
            _ensure_cat_group_name_available(db, cat_group.restaurant_id, payload.name)
        apply_updates(cat_group, payload)
    return cat_group


def remove_cat_group(db: Session, actor_id: int, cat_group_id: int) -> None:
    """Delete a group; its categories stay and lose their group."""
    with transaction(db):
        cat_group = check_cat_group_exists(db, cat_group_id)
        require_admin(db, cat_group.restaurant_id, actor_id)
        db.delete(cat_group)


# Categories


def list_categories(db: Session, actor_id: int, restaurant_id: int) -> list[Category]:
    require_member(db, restaurant_id, actor_id)
    return list(db.scalars(select(Category).where(Category.restaurant_id == restaurant_id).order_by(Category.id)))


def list_categories_for_group(db: Session, actor_id: int, cat_group_id: int) -> list[Category]:
    cat_group = get_cat_group(db, actor_id, cat_group_id)
    return list(cat_group.categories)


def register_category(db: Session, actor_id: int, payload: CategoryCreate) -> Category:
    with transaction(db):
        require_admin(db, payload.restaurant_id, actor_id)
        if payload.cat_group_id is not None:
            cat_group_and_restaurant_match(db, payload.cat_group_id, payload.restaurant_id)
        _ensure_category_name_available(db, payload.restaurant_id, payload.name)
        category = create_category(
            db,
            payload.restaurant_id,
            payload.name,
            payload.cogs_percent,
            cat_group_id=payload.cat_group_id,
            notes=payload.notes,
        )
    return category


def get_category(db: Session, actor_id: int, category_id: int) -> Category:
    category = check_category_exists(db, category_id)
    require_member(db, category.restaurant_id, actor_id)
    return category


def update_category(db: Session, actor_id: int, category_id: int, payload: CategoryUpdate) -> Category:
    with transaction(db):
        category = check_category_exists(db, category_id)
        require_admin(db, category.restaurant_id, actor_id)
        if payload.cat_group_id is not None:
            category_and_group_match(db, category_id, payload.cat_group_id)
        if payload.name is not None and payload.name != category.name:
            _ensure_category_name_available(db, category.restaurant_id, payload.name)
        apply_updates(category, payload)
    return category


def set_category_group(db: Session, actor_id: int, category_id: int, cat_group_id: int) -> Category:
    """Move a category into a group; group id 0 detaches it from any group."""
    with transaction(db):
        category = check_category_exists(db, category_id)
        require_admin(db, category.restaurant_id, actor_id)
        if cat_group_id == 0:
            category.cat_group_id = None
        else:
            category_and_group_match(db, category_id, cat_group_id)
            category.cat_group_id = cat_group_id
    return category


def remove_category(db: Session, actor_id: int, category_id: int) -> None:
    with transaction(db):
        category = check_category_exists(db, category_id)
        require_admin(db, category.restaurant_id, actor_id)
        db.delete(category)

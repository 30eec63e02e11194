"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email_address", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=128), nullable=False),
        sa.Column("last_name", sa.String(length=128), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
    )
    op.create_index("ix_users_email_address", "users", ["email_address"], unique=True)

    op.create_table(
        "restaurants",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_restaurants_owner_id", "restaurants", ["owner_id"])

    op.create_table(
        "restaurants_users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint("restaurant_id", "user_id", name="uq_restaurant_user"),
    )
    op.create_index("ix_restaurants_users_restaurant_id", "restaurants_users", ["restaurant_id"])
    op.create_index("ix_restaurants_users_user_id", "restaurants_users", ["user_id"])

    op.create_table(
        "cat_groups",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("restaurant_id", "name", name="uq_cat_group_restaurant_name"),
    )
    op.create_index("ix_cat_groups_restaurant_id", "cat_groups", ["restaurant_id"])

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("cat_group_id", sa.Integer(), sa.ForeignKey("cat_groups.id"), nullable=True),
        sa.Column("cogs_percent", sa.Numeric(5, 4), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("restaurant_id", "name", name="uq_category_restaurant_name"),
    )
    op.create_index("ix_categories_restaurant_id", "categories", ["restaurant_id"])
    op.create_index("ix_categories_cat_group_id", "categories", ["cat_group_id"])

    op.create_table(
        "meal_periods",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("restaurant_id", "name", name="uq_meal_period_restaurant_name"),
    )
    op.create_index("ix_meal_periods_restaurant_id", "meal_periods", ["restaurant_id"])

    op.create_table(
        "meal_periods_categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("meal_period_id", sa.Integer(), sa.ForeignKey("meal_periods.id"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("sales_percent_of_period", sa.Numeric(5, 4), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("meal_period_id", "category_id", name="uq_meal_period_category"),
    )
    op.create_index("ix_meal_periods_categories_restaurant_id", "meal_periods_categories", ["restaurant_id"])
    op.create_index("ix_meal_periods_categories_meal_period_id", "meal_periods_categories", ["meal_period_id"])
    op.create_index("ix_meal_periods_categories_category_id", "meal_periods_categories", ["category_id"])

    days_of_week = op.create_table(
        "days_of_week",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(length=16), nullable=False, unique=True),
    )
    op.bulk_insert(
        days_of_week,
        [
            {"id": 1, "name": "Monday"},
            {"id": 2, "name": "Tuesday"},
            {"id": 3, "name": "Wednesday"},
            {"id": 4, "name": "Thursday"},
            {"id": 5, "name": "Friday"},
            {"id": 6, "name": "Saturday"},
            {"id": 7, "name": "Sunday"},
        ],
    )

    op.create_table(
        "default_sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("meal_period_id", sa.Integer(), sa.ForeignKey("meal_periods.id"), nullable=False),
        sa.Column("day_id", sa.Integer(), sa.ForeignKey("days_of_week.id"), nullable=False),
        sa.Column("total", sa.Numeric(10, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint(
            "restaurant_id", "meal_period_id", "day_id", name="uq_default_sale_restaurant_period_day"
        ),
    )
    op.create_index("ix_default_sales_restaurant_id", "default_sales", ["restaurant_id"])
    op.create_index("ix_default_sales_meal_period_id", "default_sales", ["meal_period_id"])

    op.create_table(
        "sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column(
            "meal_period_cat_id",
            sa.Integer(),
            sa.ForeignKey("meal_periods_categories.id"),
            nullable=False,
        ),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("expected_sales", sa.Numeric(10, 2), nullable=True),
        sa.Column("actual_sales", sa.Numeric(10, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint(
            "restaurant_id", "meal_period_cat_id", "date", name="uq_sale_restaurant_period_cat_date"
        ),
    )
    op.create_index("ix_sales_restaurant_id", "sales", ["restaurant_id"])
    op.create_index("ix_sales_meal_period_cat_id", "sales", ["meal_period_cat_id"])
    op.create_index("ix_sales_date", "sales", ["date"])

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("invoice", sa.String(length=128), nullable=False),
        sa.Column("vendor", sa.String(length=255), nullable=False),
        sa.Column("total", sa.Numeric(10, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.UniqueConstraint("restaurant_id", "vendor", "invoice", name="uq_invoice_restaurant_vendor_number"),
    )
    op.create_index("ix_invoices_restaurant_id", "invoices", ["restaurant_id"])
    op.create_index("ix_invoices_date", "invoices", ["date"])

    op.create_table(
        "expenses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("restaurant_id", sa.Integer(), sa.ForeignKey("restaurants.id"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("invoice_id", sa.Integer(), sa.ForeignKey("invoices.id"), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_expenses_restaurant_id", "expenses", ["restaurant_id"])
    op.create_index("ix_expenses_category_id", "expenses", ["category_id"])
    op.create_index("ix_expenses_invoice_id", "expenses", ["invoice_id"])


def downgrade() -> None:
    op.drop_table("expenses")
    op.drop_table("invoices")
    op.drop_table("sales")
    op.drop_table("default_sales")
    op.drop_table("days_of_week")
    op.drop_table("meal_periods_categories")
    op.drop_table("meal_periods")
    op.drop_table("categories")
    op.drop_table("cat_groups")
    op.drop_table("restaurants_users")
    op.drop_table("restaurants")
    op.drop_index("ix_users_email_address", table_name="users")
    op.drop_table("users")

"""Domain constants for the finance tracker."""

from decimal import Decimal

from finance_tracker.domain.models import (
    Account,
    AccountType,
    Category,
    CategoryType,
)

DEFAULT_INCOME_CATEGORIES = (
    ("Salary", "dollarsign.circle"),
    ("Student Loan", "studentdesk"),
    ("Bursary", "banknote"),
    ("Gift", "gift"),
    ("Part-time Job", "briefcase"),
)

DEFAULT_EXPENSE_CATEGORIES = (
    ("Food", "fork.knife"),
    ("Transport", "bus"),
    ("Bills", "doc.text"),
    ("Entertainment", "film"),
    ("Education", "book"),
    ("Shopping", "cart"),
    ("Housing", "house"),
    ("Other", "ellipsis"),
)

DEFAULT_ACCOUNTS = (
    ("Savings Account", AccountType.SAVINGS),
    ("Current Account", AccountType.CURRENT),
    ("Credit Card", AccountType.CREDIT),
)

WIDGET_TRANSACTION_LIMIT = 15

THEME_COLORS = ("Blue", "Green", "Orange", "Purple", "Red", "Teal")


def default_categories(category_type: CategoryType) -> list[Category]:
    """Return fresh default categories for a category type."""
    source = (
        DEFAULT_INCOME_CATEGORIES
        if category_type == CategoryType.INCOME
        else DEFAULT_EXPENSE_CATEGORIES
    )
    return [
        Category(name=name, type=category_type, icon_name=icon)
        for name, icon in source
    ]


def default_accounts() -> list[Account]:
    """Return the accounts created on first launch."""
    return [
        Account(
            name=name,
            type=account_type,
            initial_balance=Decimal("0"),
            balance=Decimal("0"),
        )
        for name, account_type in DEFAULT_ACCOUNTS
    ]


__all__ = [
    "DEFAULT_INCOME_CATEGORIES",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_ACCOUNTS",
    "WIDGET_TRANSACTION_LIMIT",
    "THEME_COLORS",
    "default_categories",
    "default_accounts",
]

"""Tests for the ManageCategoriesUseCase."""

from dataclasses import replace
from unittest.mock import MagicMock

from finance_tracker.application.use_cases.manage_categories import (
    ManageCategoriesUseCase,
)
from finance_tracker.domain.models import (
    Category,
    CategoryType,
    FinanceState,
    TransactionType,
)


def _build():
    store = MagicMock()
    use_case = ManageCategoriesUseCase(store=store, logger=MagicMock())
    state = FinanceState(
        income_categories=[
            Category(
                id="salary",
                name="Salary",
                type=CategoryType.INCOME,
                icon_name="dollarsign.circle",
            )
        ],
        expense_categories=[
            Category(
                id="food",
                name="Food",
                type=CategoryType.EXPENSE,
                icon_name="fork.knife",
            )
        ],
    )
    return use_case, store, state


def test_add_appends_to_list_of_its_type():
    """New categories land in the list matching their type and are saved."""
    use_case, store, state = _build()
    gift = Category(name="Gift", type=CategoryType.INCOME, icon_name="gift")

    use_case.add(state, gift)

    assert state.income_categories[-1] == gift
    store.save_categories.assert_called_once_with(
        state.income_categories,
        CategoryType.INCOME,
    )


def test_update_and_delete():
    """Categories can be renamed and removed by id."""
    use_case, _, state = _build()
    food = state.expense_categories[0]

    assert use_case.update(state, replace(food, name="Groceries")) is True
    assert use_case.get(state, "food").name == "Groceries"
    assert use_case.delete(state, food) is True
    assert use_case.get(state, "food") is None
    assert use_case.delete(state, food) is False


def test_transfers_use_expense_categories():
    """Transfers are offered the expense categories."""
    use_case, _, state = _build()

    income = use_case.for_transaction_type(state, TransactionType.INCOME)
    transfer = use_case.for_transaction_type(state, TransactionType.TRANSFER)

    assert [category.id for category in income] == ["salary"]
    assert [category.id for category in transfer] == ["food"]

"""Tests for the Streamlit app module."""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from finance_tracker.adapters.interface.streamlit import app
from finance_tracker.domain.models import (
    Budget,
    BudgetType,
    Category,
    CategorySpending,
    CategoryType,
    FinanceState,
    TimePeriod,
    Transaction,
    TransactionType,
    WidgetSnapshot,
)


def test_format_currency_places_sign_before_symbol():
    """Negative values render as -£1,234.50."""
    assert app._format_currency(Decimal("-1234.5"), "£") == "-£1,234.50"
    assert app._format_currency(Decimal("12"), "$") == "$12.00"


def test_transaction_rows_sign_expenses_and_name_categories():
    """Expenses show as negative and unknown categories get a fallback."""
    transactions = [
        Transaction(
            date=datetime(2024, 3, 2),
            amount=Decimal("9.99"),
            description="Books",
            type=TransactionType.EXPENSE,
            category_id="c1",
        ),
        Transaction(
            date=datetime(2024, 3, 1),
            amount=Decimal("1500"),
            description="Salary",
            type=TransactionType.INCOME,
            category_id="missing",
        ),
    ]
    categories = [
        Category(
            id="c1",
            name="Education",
            type=CategoryType.EXPENSE,
            icon_name="book",
        )
    ]

    rows = app._transaction_rows(transactions, categories, "£")

    assert rows[0]["Amount"] == "-£9.99"
    assert rows[0]["Category"] == "Education"
    assert rows[1]["Amount"] == "£1,500.00"
    assert rows[1]["Category"] == "Uncategorized"


def test_prepare_budget_chart_data_caps_usage():
    """Overspent budgets report 100% used and nothing remaining."""
    budget = Budget(
        name="Food",
        amount=Decimal("100"),
        type=BudgetType.OVERALL,
        time_period=TimePeriod.MONTHLY,
        start_date=datetime(2024, 1, 1),
        current_spent=Decimal("150"),
    )

    data = app._prepare_budget_chart_data([budget], "£")

    assert data == [
        {
            "budget": "Food",
            "percent_used": 100.0,
            "spent_label": "£150.00",
            "limit_label": "£100.00",
            "remaining_label": "£0.00",
            "period": TimePeriod.MONTHLY.label,
        }
    ]


def test_prepare_spending_chart_data_groups_tail_into_other():
    """Categories beyond the limit are summed into Other."""
    spending = [
        CategorySpending("c1", "Rent", Decimal("600")),
        CategorySpending("c2", "Food", Decimal("250")),
        CategorySpending("c3", "Fun", Decimal("100")),
        CategorySpending("c4", "Gifts", Decimal("50")),
    ]

    data = app._prepare_spending_chart_data(spending, "£", max_categories=2)

    assert [row["category"] for row in data] == ["Rent", "Food", "Other"]
    assert data[2]["amount"] == 150.0
    assert data[0]["share_label"] == "60.0%"
    assert data[2]["amount_label"] == "£150.00"


def test_prepare_spending_chart_data_without_tail():
    """No Other slice is added when everything fits."""
    spending = [CategorySpending("c1", "Rent", Decimal("600"))]

    data = app._prepare_spending_chart_data(spending, "£")

    assert [row["category"] for row in data] == ["Rent"]
    assert data[0]["share_label"] == "100.0%"


def test_fetch_snapshot_falls_back_to_placeholder(monkeypatch):
    """A missing snapshot is replaced by the zero placeholder."""
    store = MagicMock()
    store.read_snapshot.return_value = None
    monkeypatch.setattr(app, "build_widget_snapshot_store", lambda: store)

    snapshot = app._fetch_snapshot()

    assert snapshot == WidgetSnapshot.placeholder()


def test_load_state_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_state."""
    state = FinanceState()
    monkeypatch.setattr(app, "_fetch_state", lambda: state)

    assert app._load_state(schema_version=-1) == state


class _FakeStreamlit:
    def __init__(self, page: str) -> None:
        self.page = page
        self.infos: list[str] = []
        self.subheaders: list[str] = []
        self.sidebar = SimpleNamespace(selectbox=self._selectbox)

    def _selectbox(self, label, options, **_kwargs):
        if label == "Page":
            return self.page
        return options[0]

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def subheader(self, text: str):
        self.subheaders.append(text)

    def info(self, text: str):
        self.infos.append(text)


def test_main_reports_missing_budgets(monkeypatch):
    """The budgets page explains when there is nothing to chart."""
    fake_st = _FakeStreamlit("Budgets")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_state", lambda: FinanceState())

    app.main()

    assert fake_st.title_text == "Finance Tracker"
    assert fake_st.subheaders == ["Budgets"]
    assert fake_st.infos == ["No budgets defined."]


def test_main_reports_empty_spending_period(monkeypatch):
    """The spending page explains when the period has no expenses."""
    fake_st = _FakeStreamlit("Spending")
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_state", lambda: FinanceState())

    app.main()

    assert fake_st.infos == ["No expenses in this period."]

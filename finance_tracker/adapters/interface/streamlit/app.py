"""Streamlit dashboard entry point.

The dashboard is read-only: it renders the widget snapshot, budget progress,
and category spending. Edits happen through the application use cases.
"""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

import altair as alt
import streamlit as st

from finance_tracker.application.use_cases.load_finance_data import (
    LoadFinanceDataUseCase,
)
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.domain.models import (
    Budget,
    Category,
    CategorySpending,
    FinanceState,
    Transaction,
    TransactionType,
    WidgetSnapshot,
)
from finance_tracker.domain.policies import TimeFilter, TransactionFilter
from finance_tracker.domain.services.ledger import compute_net_worth
from finance_tracker.domain.services.spending import (
    compute_category_spending,
)
from finance_tracker.infrastructure.container import (
    build_database_adapter,
    build_finance_store,
    build_widget_snapshot_store,
)

SPENDING_PERIODS = (
    TimeFilter.THIS_MONTH,
    TimeFilter.LAST_MONTH,
    TimeFilter.THIS_WEEK,
    TimeFilter.ALL,
)


def _fetch_state() -> FinanceState:
    """Load and refresh the finance state from the configured store."""
    db_adapter = build_database_adapter()
    store = build_finance_store(db_adapter)
    refresh = RefreshLedgerUseCase(
        store=store,
        snapshot_port=build_widget_snapshot_store(db_adapter),
    )
    return LoadFinanceDataUseCase(store=store, refresh=refresh).execute()


@st.cache_data(show_spinner=False)
def _load_state(schema_version: int = 1) -> FinanceState:
    """Cached wrapper around _fetch_state for Streamlit sessions."""
    _ = schema_version
    return _fetch_state()


def _fetch_snapshot() -> WidgetSnapshot:
    """Read the widget snapshot, falling back to the placeholder."""
    snapshot = build_widget_snapshot_store().read_snapshot()
    return snapshot or WidgetSnapshot.placeholder()


def _format_currency(value: Decimal, currency_symbol: str) -> str:
    """Format currency values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}{currency_symbol}{abs(value):,.2f}"


def _signed_amount(transaction: Transaction) -> Decimal:
    """Return the amount signed the way lists display it."""
    if transaction.type == TransactionType.EXPENSE:
        return -transaction.amount
    return transaction.amount


def _transaction_rows(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Prepare table rows for recent transactions."""
    names = {category.id: category.name for category in categories}
    return [
        {
            "Date": f"{transaction.date:%Y-%m-%d}",
            "Description": transaction.description,
            "Category": names.get(transaction.category_id, "Uncategorized"),
            "Type": transaction.type.value.capitalize(),
            "Amount": _format_currency(
                _signed_amount(transaction),
                currency_symbol,
            ),
        }
        for transaction in transactions
    ]


def _prepare_budget_chart_data(
    budgets: Sequence[Budget],
    currency_symbol: str,
) -> list[dict[str, str | float]]:
    """Prepare Altair rows describing budget usage.

    Args:
        budgets: Reconciled budgets.
        currency_symbol: Symbol used in labels.

    Returns:
        Rows with the used share (capped at 100%) and tooltip labels.
    """
    data: list[dict[str, str | float]] = []
    for budget in budgets:
        data.append(
            {
                "budget": budget.name,
                "percent_used": float(budget.percent_used * 100),
                "spent_label": _format_currency(
                    budget.current_spent,
                    currency_symbol,
                ),
                "limit_label": _format_currency(
                    budget.amount,
                    currency_symbol,
                ),
                "remaining_label": _format_currency(
                    budget.remaining_amount,
                    currency_symbol,
                ),
                "period": budget.time_period.label,
            }
        )
    return data


def _prepare_spending_chart_data(
    spending: Sequence[CategorySpending],
    currency_symbol: str,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping."""
    top_items = list(spending[:max_categories])
    other_amount = sum(
        (item.amount for item in spending[max_categories:]),
        start=Decimal("0"),
    )
    rows = [(item.category_name, item.amount) for item in top_items]
    if other_amount:
        rows.append(("Other", other_amount))
    total = sum((amount for _, amount in rows), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for name, amount in rows:
        share = (amount / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": name,
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_overview(state: FinanceState, snapshot: WidgetSnapshot) -> None:
    """Render balances and the widget's recent transactions."""
    symbol = state.preferences.currency_symbol
    summary = compute_net_worth(state.accounts)
    assets_col, credit_col, net_col = st.columns(3)
    assets_col.metric("Assets", _format_currency(summary.asset_total, symbol))
    credit_col.metric(
        "Credit",
        _format_currency(summary.liability_total, symbol),
    )
    net_col.metric(
        "Net Balance",
        _format_currency(snapshot.net_balance, symbol),
    )

    st.subheader("Accounts")
    st.dataframe(
        [
            {
                "Name": account.name,
                "Type": account.type.value.capitalize(),
                "Balance": _format_currency(account.balance, symbol),
                "Unallocated": _format_currency(
                    account.unallocated_balance,
                    symbol,
                ),
            }
            for account in state.accounts
        ],
        width="stretch",
        hide_index=True,
    )

    st.subheader("Recent Transactions")
    if not snapshot.transactions:
        st.info("No transactions yet.")
        return
    st.dataframe(
        _transaction_rows(
            snapshot.transactions,
            state.categories,
            symbol,
        ),
        width="stretch",
        hide_index=True,
    )


def _render_budgets(state: FinanceState) -> None:
    """Render a bar per budget showing the used share."""
    st.subheader("Budgets")
    if not state.budgets:
        st.info("No budgets defined.")
        return
    data = _prepare_budget_chart_data(
        state.budgets,
        state.preferences.currency_symbol,
    )
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        y=alt.Y("budget:N", title=None, sort=None),
        x=alt.X(
            "percent_used:Q",
            title="Used (%)",
            scale=alt.Scale(domain=[0, 100]),
        ),
        color=alt.condition(
            alt.datum.percent_used >= 100,
            alt.value("#e76f51"),
            alt.value("#1b9aaa"),
        ),
        tooltip=[
            alt.Tooltip("budget:N"),
            alt.Tooltip("period:N"),
            alt.Tooltip("spent_label:N", title="Spent"),
            alt.Tooltip("limit_label:N", title="Limit"),
            alt.Tooltip("remaining_label:N", title="Remaining"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_spending(state: FinanceState, period: TimeFilter) -> None:
    """Render a donut chart of expenses by category."""
    st.subheader(f"Spending by Category ({period.value})")
    transactions = TransactionFilter(time_filter=period).apply(
        state.transactions,
        datetime.now(),
    )
    spending = compute_category_spending(transactions, state.categories)
    if not spending:
        st.info("No expenses in this period.")
        return
    data = _prepare_spending_chart_data(
        spending,
        state.preferences.currency_symbol,
    )
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=100,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color("category:N", legend=alt.Legend(orient="bottom")),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=360, height=360)
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Tracker", layout="wide")
    st.title("Finance Tracker")

    page = st.sidebar.selectbox("Page", ["Overview", "Budgets", "Spending"])
    state = _load_state()

    if page == "Overview":
        _render_overview(state, _fetch_snapshot())
    elif page == "Budgets":
        _render_budgets(state)
    else:
        period = st.sidebar.selectbox(
            "Period",
            SPENDING_PERIODS,
            format_func=lambda item: item.value,
        )
        _render_spending(state, period)


if __name__ == "__main__":  # pragma: no cover
    main()

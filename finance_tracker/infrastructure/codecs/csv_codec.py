"""Multi-section CSV export format.

The file holds up to four sections, each introduced by a line carrying only
the section name, followed by a column header line and the data rows::

    ACCOUNTS
    ID,Name,Type,Initial Balance,Current Balance
    ...

    TRANSACTIONS
    ...

Dates are written as ``YYYY-MM-DD`` and booleans as ``true``/``false``. Pools,
preferences, and the derived budget period are not part of the CSV layout.
"""

import csv
from datetime import datetime
import io

from finance_tracker.application.ports.data_files import (
    DataFileError,
    FinanceBundle,
)
from finance_tracker.domain.models import (
    Account,
    AccountType,
    Budget,
    BudgetType,
    Category,
    CategoryType,
    RecurrenceInterval,
    TimePeriod,
    Transaction,
    TransactionType,
)
from finance_tracker.infrastructure.codecs.json_codec import (
    DECODE_ERRORS,
    optional_amount,
    require_amount,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger

ACCOUNT_COLUMNS = (
    "ID",
    "Name",
    "Type",
    "Initial Balance",
    "Current Balance",
)
TRANSACTION_COLUMNS = (
    "ID",
    "Date",
    "Amount",
    "Description",
    "From Account",
    "To Account",
    "From Account ID",
    "To Account ID",
    "Type",
    "Category ID",
    "Is Split",
    "Friend Name",
    "Friend Amount",
    "User Amount",
    "Friend Payment Destination",
    "Is Recurring",
    "Recurrence Interval",
)
CATEGORY_COLUMNS = ("ID", "Name", "Type", "Icon Name")
BUDGET_COLUMNS = (
    "ID",
    "Name",
    "Amount",
    "Type",
    "Time Period",
    "Category ID",
    "Account ID",
    "Start Date",
    "Current Spent",
)

SECTIONS = {
    "ACCOUNTS": ACCOUNT_COLUMNS,
    "TRANSACTIONS": TRANSACTION_COLUMNS,
    "CATEGORIES": CATEGORY_COLUMNS,
    "BUDGETS": BUDGET_COLUMNS,
}

DATE_FORMAT = "%Y-%m-%d"


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no", ""):
        return False
    raise ValueError(f"Invalid boolean {value!r}")


def _parse_date(value: str) -> datetime:
    raw = value.strip()
    if not raw:
        raise ValueError("Missing date")
    return datetime.fromisoformat(raw)


def _optional(value: str) -> str | None:
    raw = value.strip()
    return raw or None


def _optional_account_type(value: str) -> AccountType | None:
    raw = value.strip()
    return AccountType(raw) if raw else None


def _row(columns: tuple[str, ...], values: list[str]) -> dict[str, str]:
    if len(values) < len(columns):
        raise ValueError(
            f"Expected {len(columns)} columns, found {len(values)}"
        )
    return dict(zip(columns, values))


def account_row(account: Account) -> list:
    return [
        account.id,
        account.name,
        account.type.value,
        account.initial_balance,
        account.balance,
    ]


def transaction_row(transaction: Transaction) -> list:
    return [
        transaction.id,
        transaction.date.strftime(DATE_FORMAT),
        transaction.amount,
        transaction.description,
        transaction.from_account.value if transaction.from_account else "",
        transaction.to_account.value if transaction.to_account else "",
        transaction.from_account_id or "",
        transaction.to_account_id or "",
        transaction.type.value,
        transaction.category_id,
        _format_bool(transaction.is_split),
        transaction.friend_name,
        transaction.friend_amount,
        transaction.user_amount,
        transaction.friend_payment_destination,
        _format_bool(transaction.is_recurring),
        transaction.recurrence_interval.value,
    ]


def category_row(category: Category) -> list:
    return [
        category.id,
        category.name,
        category.type.value,
        category.icon_name,
    ]


def budget_row(budget: Budget) -> list:
    return [
        budget.id,
        budget.name,
        budget.amount,
        budget.type.value,
        budget.time_period.value,
        budget.category_id or "",
        budget.account_id or "",
        budget.start_date.strftime(DATE_FORMAT),
        budget.current_spent,
    ]


def parse_account(values: list[str]) -> Account:
    row = _row(ACCOUNT_COLUMNS, values)
    initial_balance = require_amount(row["Initial Balance"])
    balance = row["Current Balance"].strip()
    return Account(
        id=row["ID"].strip(),
        name=row["Name"],
        type=AccountType(row["Type"].strip()),
        initial_balance=initial_balance,
        balance=require_amount(balance) if balance else initial_balance,
    )


def parse_transaction(values: list[str]) -> Transaction:
    row = _row(TRANSACTION_COLUMNS, values)
    return Transaction(
        id=row["ID"].strip(),
        date=_parse_date(row["Date"]),
        amount=require_amount(row["Amount"]),
        description=row["Description"],
        from_account=_optional_account_type(row["From Account"]),
        to_account=_optional_account_type(row["To Account"]),
        from_account_id=_optional(row["From Account ID"]),
        to_account_id=_optional(row["To Account ID"]),
        type=TransactionType(row["Type"].strip()),
        category_id=row["Category ID"].strip(),
        is_split=_parse_bool(row["Is Split"]),
        friend_name=row["Friend Name"],
        friend_amount=optional_amount(row["Friend Amount"].strip()),
        user_amount=optional_amount(row["User Amount"].strip()),
        friend_payment_destination=row["Friend Payment Destination"],
        is_recurring=_parse_bool(row["Is Recurring"]),
        recurrence_interval=RecurrenceInterval(
            row["Recurrence Interval"].strip() or RecurrenceInterval.NONE.value
        ),
    )


def parse_category(values: list[str]) -> Category:
    row = _row(CATEGORY_COLUMNS, values)
    return Category(
        id=row["ID"].strip(),
        name=row["Name"],
        type=CategoryType(row["Type"].strip()),
        icon_name=row["Icon Name"].strip() or "ellipsis",
    )


def parse_budget(values: list[str]) -> Budget:
    row = _row(BUDGET_COLUMNS, values)
    return Budget(
        id=row["ID"].strip(),
        name=row["Name"],
        amount=require_amount(row["Amount"]),
        type=BudgetType(row["Type"].strip()),
        time_period=TimePeriod(row["Time Period"].strip()),
        category_id=_optional(row["Category ID"]),
        account_id=_optional(row["Account ID"]),
        start_date=_parse_date(row["Start Date"]),
        current_spent=optional_amount(row["Current Spent"].strip()),
    )


class CsvDataFileCodec:
    """Codec for the sectioned CSV export."""

    extension = "csv"
    keeps_time_of_day = False

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def encode(self, bundle: FinanceBundle) -> str:
        """Encode entity lists as sectioned CSV text."""
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        sections = (
            ("ACCOUNTS", [account_row(item) for item in bundle.accounts]),
            (
                "TRANSACTIONS",
                [transaction_row(item) for item in bundle.transactions],
            ),
            ("CATEGORIES", [category_row(item) for item in bundle.categories]),
            ("BUDGETS", [budget_row(item) for item in bundle.budgets]),
        )
        for position, (name, rows) in enumerate(sections):
            if position:
                writer.writerow([])
            writer.writerow([name])
            writer.writerow(SECTIONS[name])
            writer.writerows(rows)
        return output.getvalue()

    def decode(self, text: str) -> FinanceBundle:
        """Decode sectioned CSV text.

        Rows that fail to parse are skipped and counted.

        Raises:
            DataFileError: If no known section header is present.
        """
        parsers = {
            "ACCOUNTS": (parse_account, "accounts"),
            "TRANSACTIONS": (parse_transaction, "transactions"),
            "CATEGORIES": (parse_category, "categories"),
            "BUDGETS": (parse_budget, "budgets"),
        }
        bundle = FinanceBundle()
        section = None
        expects_header = False
        found_section = False
        try:
            rows = list(csv.reader(io.StringIO(text)))
        except csv.Error as exc:
            raise DataFileError(f"Invalid CSV content: {exc}") from exc

        for line_number, values in enumerate(rows, start=1):
            if not any(value.strip() for value in values):
                continue
            marker = values[0].strip().upper()
            if marker in SECTIONS and not any(v.strip() for v in values[1:]):
                section = marker
                expects_header = True
                found_section = True
                continue
            if section is None:
                continue
            if expects_header:
                expects_header = False
                if marker == "ID":
                    continue
            parser, attribute = parsers[section]
            try:
                record = parser(values)
            except DECODE_ERRORS as exc:
                bundle.skipped_rows += 1
                self._logger.warning(
                    f"Skipped {section.lower()} row on line {line_number}: "
                    f"{exc!r}"
                )
                continue
            getattr(bundle, attribute).append(record)

        if not found_section:
            raise DataFileError(
                "CSV file has no ACCOUNTS, TRANSACTIONS, CATEGORIES or "
                "BUDGETS section"
            )
        return bundle


__all__ = [
    "ACCOUNT_COLUMNS",
    "TRANSACTION_COLUMNS",
    "CATEGORY_COLUMNS",
    "BUDGET_COLUMNS",
    "CsvDataFileCodec",
]

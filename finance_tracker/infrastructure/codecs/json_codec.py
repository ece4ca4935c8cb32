"""JSON encoding of finance entities.

Entities map to camelCase dictionaries using the same keys as the mobile
app's export files. Dates are written as ISO-8601 strings; numeric dates
(seconds since 2001-01-01 UTC, as written by the mobile app) are accepted when
reading. Export files carry amounts as JSON numbers; the document store asks
for exact decimal strings. Both forms are accepted when reading.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
import json

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
    Pool,
    RecurrenceInterval,
    TimePeriod,
    Transaction,
    TransactionType,
    UserPreferences,
    WidgetSnapshot,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.utils.decimal_utils import parse_decimal

REFERENCE_DATE = datetime(2001, 1, 1)

DECODE_ERRORS = (
    KeyError,
    TypeError,
    ValueError,
    AttributeError,
    OverflowError,
)


def format_datetime(value: datetime | None) -> str | None:
    """Return the ISO-8601 form of a datetime."""
    if value is None:
        return None
    return value.isoformat()


def parse_datetime(value) -> datetime | None:
    """Parse an ISO-8601 string or a reference-date offset.

    Args:
        value: String, number of seconds since 2001-01-01, or None.

    Returns:
        datetime | None: Naive datetime in UTC when an offset was given.

    Raises:
        ValueError: If the value is not a recognizable date.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid date {value!r}")
    if isinstance(value, (int, float)):
        return REFERENCE_DATE + timedelta(seconds=value)
    parsed = datetime.fromisoformat(str(value).strip())
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def require_datetime(value) -> datetime:
    """Parse a mandatory date."""
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError("Missing date")
    return parsed


def require_amount(value) -> Decimal:
    """Parse a mandatory amount.

    Raises:
        ValueError: If the value is not a finite number.
    """
    parsed = parse_decimal(value)
    if parsed is None:
        raise ValueError(f"Invalid amount {value!r}")
    return parsed


def optional_amount(value) -> Decimal:
    """Parse an amount that defaults to zero when absent."""
    if value is None or value == "":
        return Decimal("0")
    return require_amount(value)


def encode_amount(value: Decimal, exact: bool = False) -> float | str:
    """Return an amount as a JSON number, or as a string when exact."""
    return str(value) if exact else float(value)


def _optional_enum(enum_type, value):
    if value is None or value == "":
        return None
    return enum_type(value)


def encode_pool(pool: Pool, exact: bool = False) -> dict:
    return {
        "id": pool.id,
        "name": pool.name,
        "amount": encode_amount(pool.amount, exact),
        "color": pool.color,
    }


def decode_pool(data: dict) -> Pool:
    return Pool(
        id=str(data["id"]),
        name=data["name"],
        amount=require_amount(data["amount"]),
        color=data.get("color") or "Blue",
    )


def encode_account(account: Account, exact: bool = False) -> dict:
    return {
        "id": account.id,
        "name": account.name,
        "type": account.type.value,
        "initialBalance": encode_amount(account.initial_balance, exact),
        "balance": encode_amount(account.balance, exact),
        "pools": [encode_pool(pool, exact) for pool in account.pools],
    }


def decode_account(data: dict) -> Account:
    initial_balance = optional_amount(data.get("initialBalance"))
    balance = data.get("balance")
    return Account(
        id=str(data["id"]),
        name=data["name"],
        type=AccountType(data["type"]),
        initial_balance=initial_balance,
        balance=(
            initial_balance if balance is None else require_amount(balance)
        ),
        pools=tuple(decode_pool(item) for item in data.get("pools") or ()),
    )


def encode_transaction(
    transaction: Transaction,
    exact: bool = False,
) -> dict:
    return {
        "id": transaction.id,
        "date": format_datetime(transaction.date),
        "amount": encode_amount(transaction.amount, exact),
        "description": transaction.description,
        "fromAccount": _enum_value(transaction.from_account),
        "toAccount": _enum_value(transaction.to_account),
        "fromAccountId": transaction.from_account_id,
        "toAccountId": transaction.to_account_id,
        "type": transaction.type.value,
        "categoryId": transaction.category_id,
        "poolId": transaction.pool_id,
        "isSplit": transaction.is_split,
        "friendName": transaction.friend_name,
        "friendAmount": encode_amount(transaction.friend_amount, exact),
        "userAmount": encode_amount(transaction.user_amount, exact),
        "friendPaymentDestination": transaction.friend_payment_destination,
        "friendPaymentAccountId": transaction.friend_payment_account_id,
        "friendPaymentIsAccount": transaction.friend_payment_is_account,
        "isFutureTransaction": transaction.is_future_transaction,
        "isRecurring": transaction.is_recurring,
        "recurrenceInterval": transaction.recurrence_interval.value,
        "recurrenceEndDate": format_datetime(transaction.recurrence_end_date),
        "parentTransactionId": transaction.parent_transaction_id,
    }


def decode_transaction(data: dict) -> Transaction:
    return Transaction(
        id=str(data["id"]),
        date=require_datetime(data["date"]),
        amount=require_amount(data["amount"]),
        description=data.get("description") or "",
        type=TransactionType(data["type"]),
        category_id=str(data["categoryId"]),
        from_account=_optional_enum(AccountType, data.get("fromAccount")),
        to_account=_optional_enum(AccountType, data.get("toAccount")),
        from_account_id=data.get("fromAccountId"),
        to_account_id=data.get("toAccountId"),
        pool_id=data.get("poolId"),
        is_split=bool(data.get("isSplit", False)),
        friend_name=data.get("friendName") or "",
        friend_amount=optional_amount(data.get("friendAmount")),
        user_amount=optional_amount(data.get("userAmount")),
        friend_payment_destination=data.get("friendPaymentDestination") or "",
        friend_payment_account_id=data.get("friendPaymentAccountId"),
        friend_payment_is_account=bool(
            data.get("friendPaymentIsAccount", False)
        ),
        is_future_transaction=bool(data.get("isFutureTransaction", False)),
        is_recurring=bool(data.get("isRecurring", False)),
        recurrence_interval=RecurrenceInterval(
            data.get("recurrenceInterval") or RecurrenceInterval.NONE.value
        ),
        recurrence_end_date=parse_datetime(data.get("recurrenceEndDate")),
        parent_transaction_id=data.get("parentTransactionId"),
    )


def encode_category(category: Category) -> dict:
    return {
        "id": category.id,
        "name": category.name,
        "type": category.type.value,
        "iconName": category.icon_name,
    }


def decode_category(
    data: dict,
    default_type: CategoryType | None = None,
) -> Category:
    raw_type = data.get("type")
    category_type = CategoryType(raw_type) if raw_type else default_type
    if category_type is None:
        raise ValueError("Category type is missing")
    return Category(
        id=str(data["id"]),
        name=data["name"],
        type=category_type,
        icon_name=data.get("iconName") or "ellipsis",
    )


def encode_budget(budget: Budget, exact: bool = False) -> dict:
    return {
        "id": budget.id,
        "name": budget.name,
        "amount": encode_amount(budget.amount, exact),
        "type": budget.type.value,
        "timePeriod": budget.time_period.value,
        "categoryId": budget.category_id,
        "accountId": budget.account_id,
        "startDate": format_datetime(budget.start_date),
        "periodStartDate": format_datetime(budget.period_start_date),
        "currentSpent": encode_amount(budget.current_spent, exact),
    }


def decode_budget(data: dict) -> Budget:
    return Budget(
        id=str(data["id"]),
        name=data["name"],
        amount=require_amount(data["amount"]),
        type=BudgetType(data["type"]),
        time_period=TimePeriod(data["timePeriod"]),
        start_date=require_datetime(data["startDate"]),
        category_id=data.get("categoryId"),
        account_id=data.get("accountId"),
        period_start_date=parse_datetime(data.get("periodStartDate")),
        current_spent=optional_amount(data.get("currentSpent")),
    )


def encode_preferences(preferences: UserPreferences) -> dict:
    return {
        "userName": preferences.user_name,
        "themeColorName": preferences.theme_color_name,
        "hasCompletedOnboarding": preferences.has_completed_onboarding,
        "currencySymbol": preferences.currency_symbol,
        "locale": preferences.locale,
    }


def decode_preferences(data: dict) -> UserPreferences:
    defaults = UserPreferences()
    return UserPreferences(
        user_name=data.get("userName") or defaults.user_name,
        theme_color_name=(
            data.get("themeColorName") or defaults.theme_color_name
        ),
        has_completed_onboarding=bool(
            data.get("hasCompletedOnboarding", False)
        ),
        currency_symbol=data.get("currencySymbol") or defaults.currency_symbol,
        locale=data.get("locale") or defaults.locale,
    )


def encode_snapshot(
    snapshot: WidgetSnapshot,
    exact: bool = False,
) -> dict:
    return {
        "netBalance": encode_amount(snapshot.net_balance, exact),
        "transactions": [
            encode_transaction(item, exact) for item in snapshot.transactions
        ],
        "categories": [encode_category(item) for item in snapshot.categories],
        "themeColorName": snapshot.theme_color_name,
        "generatedAt": format_datetime(snapshot.generated_at),
    }


def decode_snapshot(data: dict) -> WidgetSnapshot:
    return WidgetSnapshot(
        net_balance=optional_amount(data.get("netBalance")),
        transactions=tuple(
            decode_transaction(item) for item in data.get("transactions") or ()
        ),
        categories=tuple(
            decode_category(item) for item in data.get("categories") or ()
        ),
        theme_color_name=data.get("themeColorName") or "Blue",
        generated_at=parse_datetime(data.get("generatedAt")),
    )


def _enum_value(value):
    return value.value if value is not None else None


class JsonDataFileCodec:
    """Codec for the JSON export document."""

    extension = "json"
    keeps_time_of_day = True

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def encode(self, bundle: FinanceBundle) -> str:
        """Encode entity lists as a pretty-printed JSON document."""
        document = {
            "accounts": [encode_account(item) for item in bundle.accounts],
            "transactions": [
                encode_transaction(item) for item in bundle.transactions
            ],
            "incomeCategories": [
                encode_category(item)
                for item in bundle.categories
                if item.type == CategoryType.INCOME
            ],
            "expenseCategories": [
                encode_category(item)
                for item in bundle.categories
                if item.type == CategoryType.EXPENSE
            ],
            "budgets": [encode_budget(item) for item in bundle.budgets],
        }
        if bundle.preferences is not None:
            document["userPreferences"] = encode_preferences(
                bundle.preferences
            )
        return json.dumps(document, indent=2, ensure_ascii=False)

    def decode(self, text: str) -> FinanceBundle:
        """Decode a JSON export document.

        Records that fail to parse are skipped and counted.

        Raises:
            DataFileError: If the document is not valid JSON or holds no
                finance data.
        """
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DataFileError(f"Invalid JSON document: {exc}") from exc
        if not isinstance(document, dict):
            raise DataFileError("JSON export must be an object")
        known = {
            "accounts",
            "transactions",
            "incomeCategories",
            "expenseCategories",
            "budgets",
            "userPreferences",
        }
        if not known & document.keys():
            raise DataFileError("JSON document holds no finance data")

        bundle = FinanceBundle()
        bundle.accounts = self._records(
            document,
            "accounts",
            decode_account,
            bundle,
        )
        bundle.transactions = self._records(
            document,
            "transactions",
            decode_transaction,
            bundle,
        )
        bundle.categories = self._records(
            document,
            "incomeCategories",
            lambda data: decode_category(data, CategoryType.INCOME),
            bundle,
        ) + self._records(
            document,
            "expenseCategories",
            lambda data: decode_category(data, CategoryType.EXPENSE),
            bundle,
        )
        bundle.budgets = self._records(
            document,
            "budgets",
            decode_budget,
            bundle,
        )

        preferences = document.get("userPreferences")
        if isinstance(preferences, dict):
            bundle.preferences = decode_preferences(preferences)
        return bundle

    def _records(self, document: dict, key: str, decoder, bundle) -> list:
        items = document.get(key) or []
        if not isinstance(items, list):
            raise DataFileError(f"JSON key {key!r} must hold a list")
        records = []
        for position, item in enumerate(items):
            try:
                records.append(decoder(item))
            except DECODE_ERRORS as exc:
                bundle.skipped_rows += 1
                self._logger.warning(
                    f"Skipped {key} record {position}: {exc!r}"
                )
        return records


__all__ = [
    "REFERENCE_DATE",
    "format_datetime",
    "parse_datetime",
    "require_datetime",
    "require_amount",
    "optional_amount",
    "encode_amount",
    "encode_account",
    "decode_account",
    "encode_transaction",
    "decode_transaction",
    "encode_category",
    "decode_category",
    "encode_budget",
    "decode_budget",
    "encode_preferences",
    "decode_preferences",
    "encode_snapshot",
    "decode_snapshot",
    "JsonDataFileCodec",
]

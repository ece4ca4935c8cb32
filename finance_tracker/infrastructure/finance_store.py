"""SQLAlchemy-backed storage for finance entity lists."""

from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.domain.models import (
    Account,
    Budget,
    Category,
    CategoryType,
    Transaction,
    UserPreferences,
)
from finance_tracker.infrastructure.codecs.json_codec import (
    decode_account,
    decode_budget,
    decode_category,
    decode_preferences,
    decode_transaction,
    encode_account,
    encode_budget,
    encode_category,
    encode_preferences,
    encode_transaction,
)
from finance_tracker.infrastructure.document_store import (
    SqlAlchemyDocumentStore,
)

ACCOUNTS_KEY = "accounts"
TRANSACTIONS_KEY = "transactions"
BUDGETS_KEY = "budgets"
PREFERENCES_KEY = "userPreferences"
CATEGORY_KEYS = {
    CategoryType.INCOME: "incomeCategories",
    CategoryType.EXPENSE: "expenseCategories",
}


class SqlAlchemyFinanceStore(SqlAlchemyDocumentStore, FinanceStorePort):
    """Finance store keeping one JSON document per entity list."""

    def load_accounts(self) -> list[Account] | None:
        return self.read_records(ACCOUNTS_KEY, decode_account)

    def save_accounts(self, accounts: list[Account]) -> None:
        self.write_document(
            ACCOUNTS_KEY,
            [encode_account(account, exact=True) for account in accounts],
        )

    def load_transactions(self) -> list[Transaction] | None:
        return self.read_records(TRANSACTIONS_KEY, decode_transaction)

    def save_transactions(self, transactions: list[Transaction]) -> None:
        self.write_document(
            TRANSACTIONS_KEY,
            [
                encode_transaction(transaction, exact=True)
                for transaction in transactions
            ],
        )

    def load_categories(
        self,
        category_type: CategoryType,
    ) -> list[Category] | None:
        return self.read_records(
            CATEGORY_KEYS[category_type],
            lambda data: decode_category(data, category_type),
        )

    def save_categories(
        self,
        categories: list[Category],
        category_type: CategoryType,
    ) -> None:
        self.write_document(
            CATEGORY_KEYS[category_type],
            [encode_category(category) for category in categories],
        )

    def load_budgets(self) -> list[Budget] | None:
        return self.read_records(BUDGETS_KEY, decode_budget)

    def save_budgets(self, budgets: list[Budget]) -> None:
        self.write_document(
            BUDGETS_KEY,
            [encode_budget(budget, exact=True) for budget in budgets],
        )

    def load_preferences(self) -> UserPreferences | None:
        document = self.read_document(PREFERENCES_KEY)
        if not isinstance(document, dict):
            return None
        return decode_preferences(document)

    def save_preferences(self, preferences: UserPreferences) -> None:
        self.write_document(PREFERENCES_KEY, encode_preferences(preferences))


__all__ = ["SqlAlchemyFinanceStore"]

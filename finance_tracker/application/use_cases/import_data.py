"""Use case merging an export file into the finance state.

Imported entities receive fresh identities. An id mapping table rewrites
foreign keys between imported records; records already present are skipped
and mapped onto the existing entity instead:

    accounts      (name, type)
    categories    (name, type)
    transactions  (date, amount, description)
    budgets       (name, amount)

Formats without a time of day (CSV) compare transaction dates by day.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
import uuid

from finance_tracker.application.ports.data_files import (
    DataFileCodecPort,
    DataFileError,
    FinanceBundle,
)
from finance_tracker.application.ports.finance_store import FinanceStorePort
from finance_tracker.application.use_cases.refresh_ledger import (
    RefreshLedgerUseCase,
)
from finance_tracker.domain.models import (
    Account,
    Budget,
    Category,
    CategoryType,
    FinanceState,
    Transaction,
)
from finance_tracker.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


@dataclass(frozen=True)
class ImportResult:
    """Outcome of an import.

    Attributes:
        success: Whether the file was merged.
        message: Human-readable summary or failure reason.
        accounts_count: Number of accounts added.
        transactions_count: Number of transactions added.
        categories_count: Number of categories added.
        budgets_count: Number of budgets added.
        skipped_rows: Number of records dropped because they failed to parse.
    """

    success: bool
    message: str
    accounts_count: int = 0
    transactions_count: int = 0
    categories_count: int = 0
    budgets_count: int = 0
    skipped_rows: int = 0


class ImportDataUseCase:
    """Decode an export file and merge it into the current state."""

    def __init__(
        self,
        store: FinanceStorePort,
        refresh: RefreshLedgerUseCase,
        codecs: list[DataFileCodecPort],
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting the merged entity lists.
            refresh: Use case re-deriving balances and budgets.
            codecs: Supported file formats, selected by extension.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user operations.
        """
        self._store = store
        self._refresh = refresh
        self._codecs = {codec.extension: codec for codec in codecs}
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        state: FinanceState,
        path: str | Path,
        now: datetime | None = None,
    ) -> ImportResult:
        """Import a CSV or JSON export file.

        File-level failures leave the state untouched and are reported in
        the result rather than raised.

        Args:
            state: Finance state updated in place on success.
            path: File to import.
            now: Reference moment for budget periods.

        Returns:
            ImportResult: Summary of the merge.
        """
        file_path = Path(path)
        try:
            codec, bundle = self._decode(file_path)
        except DataFileError as exc:
            self._logger.error(f"Import of {file_path} failed: {exc}")
            return ImportResult(success=False, message=str(exc))

        merge = _Merge(state, match_by_day=not codec.keeps_time_of_day)
        added_accounts = merge.accounts(bundle.accounts)
        added_categories = merge.categories(bundle.categories)
        added_transactions = merge.transactions(bundle.transactions)
        added_budgets = merge.budgets(bundle.budgets)

        state.accounts = [*merge.existing_accounts, *added_accounts]
        state.income_categories = [
            *state.income_categories,
            *(c for c in added_categories if c.type == CategoryType.INCOME),
        ]
        state.expense_categories = [
            *state.expense_categories,
            *(c for c in added_categories if c.type == CategoryType.EXPENSE),
        ]
        state.transactions = [*state.transactions, *added_transactions]
        state.budgets = [*state.budgets, *added_budgets]
        if bundle.preferences is not None:
            state.preferences = bundle.preferences
            self._store.save_preferences(state.preferences)

        self._store.save_transactions(state.transactions)
        self._store.save_categories(
            state.income_categories,
            CategoryType.INCOME,
        )
        self._store.save_categories(
            state.expense_categories,
            CategoryType.EXPENSE,
        )
        self._refresh.execute(state, now)

        message = (
            f"Imported {len(added_accounts)} accounts, "
            f"{len(added_transactions)} transactions, "
            f"{len(added_categories)} categories and "
            f"{len(added_budgets)} budgets"
        )
        if bundle.skipped_rows:
            message += f" ({bundle.skipped_rows} rows skipped)"
        self._usage_logger.info(f"Imported {file_path.name}: {message}")
        return ImportResult(
            success=True,
            message=message,
            accounts_count=len(added_accounts),
            transactions_count=len(added_transactions),
            categories_count=len(added_categories),
            budgets_count=len(added_budgets),
            skipped_rows=bundle.skipped_rows,
        )

    def _decode(
        self,
        file_path: Path,
    ) -> tuple[DataFileCodecPort, FinanceBundle]:
        extension = file_path.suffix.lower().lstrip(".")
        codec = self._codecs.get(extension)
        if codec is None:
            raise DataFileError(
                f"Unsupported file format {file_path.suffix or '(none)'}"
            )
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as exc:
            raise DataFileError(f"File not found: {file_path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DataFileError(f"Could not read {file_path}: {exc}") from exc
        return codec, codec.decode(text)


class _Merge:
    """Dedup and id rewriting for one import.

    Imported records are only compared with the records present before the
    import, so repeated entries inside one file are all kept.
    """

    def __init__(self, state: FinanceState, match_by_day: bool) -> None:
        self._state = state
        self._match_by_day = match_by_day
        self._ids: dict[str, str] = {}
        self.existing_accounts = list(state.accounts)

    def _map(self, value: str | None) -> str | None:
        if value is None:
            return None
        return self._ids.get(value, value)

    def accounts(self, imported: list[Account]) -> list[Account]:
        existing = {
            (account.name, account.type): index
            for index, account in enumerate(self.existing_accounts)
        }
        added = []
        for account in imported:
            index = existing.get((account.name, account.type))
            if index is not None:
                self._absorb_pools(index, account)
                continue
            pools = []
            for pool in account.pools:
                fresh_pool = replace(pool, id=str(uuid.uuid4()))
                self._ids[pool.id] = fresh_pool.id
                pools.append(fresh_pool)
            fresh = replace(
                account,
                id=str(uuid.uuid4()),
                balance=account.initial_balance,
                pools=tuple(pools),
            )
            self._ids[account.id] = fresh.id
            added.append(fresh)
        return added

    def _absorb_pools(self, index: int, imported: Account) -> None:
        target = self.existing_accounts[index]
        self._ids[imported.id] = target.id
        by_name = {pool.name: pool.id for pool in target.pools}
        new_pools = []
        for pool in imported.pools:
            if pool.name in by_name:
                self._ids[pool.id] = by_name[pool.name]
                continue
            fresh_pool = replace(pool, id=str(uuid.uuid4()))
            self._ids[pool.id] = fresh_pool.id
            by_name[pool.name] = fresh_pool.id
            new_pools.append(fresh_pool)
        if new_pools:
            self.existing_accounts[index] = replace(
                target,
                pools=(*target.pools, *new_pools),
            )

    def categories(self, imported: list[Category]) -> list[Category]:
        existing = {
            (category.name, category.type): category.id
            for category in self._state.categories
        }
        added = []
        for category in imported:
            key = (category.name, category.type)
            if key in existing:
                self._ids[category.id] = existing[key]
                continue
            fresh = replace(category, id=str(uuid.uuid4()))
            self._ids[category.id] = fresh.id
            added.append(fresh)
        return added

    def transactions(self, imported: list[Transaction]) -> list[Transaction]:
        existing = {
            self._transaction_key(transaction): transaction.id
            for transaction in self._state.transactions
        }
        kept = []
        for transaction in imported:
            match = existing.get(self._transaction_key(transaction))
            if match is not None:
                self._ids[transaction.id] = match
                continue
            self._ids[transaction.id] = str(uuid.uuid4())
            kept.append(transaction)
        return [
            replace(
                transaction,
                id=self._ids[transaction.id],
                from_account_id=self._map(transaction.from_account_id),
                to_account_id=self._map(transaction.to_account_id),
                friend_payment_account_id=self._map(
                    transaction.friend_payment_account_id
                ),
                category_id=self._map(transaction.category_id),
                pool_id=self._map(transaction.pool_id),
                parent_transaction_id=self._map(
                    transaction.parent_transaction_id
                ),
            )
            for transaction in kept
        ]

    def budgets(self, imported: list[Budget]) -> list[Budget]:
        existing = {
            (budget.name, budget.amount) for budget in self._state.budgets
        }
        return [
            replace(
                budget,
                id=str(uuid.uuid4()),
                category_id=self._map(budget.category_id),
                account_id=self._map(budget.account_id),
            )
            for budget in imported
            if (budget.name, budget.amount) not in existing
        ]

    def _transaction_key(self, transaction: Transaction):
        moment = transaction.date
        if self._match_by_day:
            moment = moment.date()
        return (moment, transaction.amount, transaction.description)


__all__ = ["ImportDataUseCase", "ImportResult"]

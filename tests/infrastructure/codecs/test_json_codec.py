"""Tests for the JSON export codec."""

from datetime import datetime
from decimal import Decimal
import json
from unittest.mock import MagicMock

import pytest

from finance_tracker.application.ports.data_files import (
    DataFileError,
    FinanceBundle,
)
from finance_tracker.domain.models import (
    Account,
    AccountType,
    Category,
    CategoryType,
    Pool,
    Transaction,
    TransactionType,
    UserPreferences,
)
from finance_tracker.infrastructure.codecs.json_codec import (
    JsonDataFileCodec,
    parse_datetime,
)


def _codec():
    return JsonDataFileCodec(logger=MagicMock())


def test_parse_datetime_accepts_reference_offsets_and_iso():
    """Numbers count seconds from 2001-01-01; strings are ISO-8601."""
    assert parse_datetime(0) == datetime(2001, 1, 1)
    assert parse_datetime(86400.5) == datetime(2001, 1, 2, 0, 0, 0, 500000)
    assert parse_datetime("2024-03-01T10:15:00") == datetime(
        2024, 3, 1, 10, 15
    )
    assert parse_datetime("2024-03-01T10:15:00+01:00") == datetime(
        2024, 3, 1, 9, 15
    )
    assert parse_datetime(None) is None
    with pytest.raises(ValueError):
        parse_datetime(True)


def test_encode_splits_categories_and_writes_preferences():
    """Categories are grouped by type and amounts written as numbers."""
    bundle = FinanceBundle(
        accounts=[
            Account(
                id="a1",
                name="Savings",
                type=AccountType.SAVINGS,
                initial_balance=Decimal("250.75"),
                pools=(Pool(id="p1", name="Trip", amount=Decimal("50")),),
            )
        ],
        categories=[
            Category(id="c1", name="Salary", type=CategoryType.INCOME,
                     icon_name="banknote"),
            Category(id="c2", name="Food", type=CategoryType.EXPENSE,
                     icon_name="fork.knife"),
        ],
        preferences=UserPreferences(user_name="Sam"),
    )

    document = json.loads(_codec().encode(bundle))

    assert [item["id"] for item in document["incomeCategories"]] == ["c1"]
    assert [item["id"] for item in document["expenseCategories"]] == ["c2"]
    assert document["accounts"][0]["initialBalance"] == 250.75
    assert document["accounts"][0]["pools"][0]["name"] == "Trip"
    assert document["userPreferences"]["userName"] == "Sam"
    assert document["transactions"] == []


def test_decode_reads_mobile_export_document():
    """Numeric dates, string amounts and typeless categories are accepted."""
    text = json.dumps(
        {
            "accounts": [
                {"id": "a1", "name": "Current", "type": "current",
                 "initialBalance": "100.10"}
            ],
            "transactions": [
                {"id": "t1", "date": 731548800, "amount": 12.5,
                 "description": "Lunch", "type": "expense",
                 "categoryId": "c1", "fromAccountId": "a1"}
            ],
            "expenseCategories": [
                {"id": "c1", "name": "Food", "iconName": "fork.knife"}
            ],
            "userPreferences": {"currencySymbol": "$"},
        }
    )

    bundle = _codec().decode(text)

    account = bundle.accounts[0]
    assert account.initial_balance == Decimal("100.10")
    assert account.balance == Decimal("100.10")
    transaction = bundle.transactions[0]
    assert transaction.date == datetime(2024, 3, 8)
    assert transaction.amount == Decimal("12.5")
    assert transaction.type == TransactionType.EXPENSE
    assert bundle.categories[0].type == CategoryType.EXPENSE
    assert bundle.preferences.currency_symbol == "$"
    assert bundle.preferences.theme_color_name == "Blue"
    assert bundle.skipped_rows == 0


def test_decode_skips_malformed_records():
    """Records that fail to parse are counted, not fatal."""
    logger = MagicMock()
    text = json.dumps(
        {
            "transactions": [
                {"id": "t1", "date": "2024-03-01", "amount": "abc",
                 "type": "expense", "categoryId": "c1"},
                {"id": "t2", "date": "2024-03-01", "amount": 5,
                 "type": "expense", "categoryId": "c1"},
                {"id": "t3", "amount": 5, "type": "expense",
                 "categoryId": "c1"},
            ],
            "budgets": [{"id": "b1", "name": "Food", "amount": 80,
                         "type": "overall", "timePeriod": "fortnightly",
                         "startDate": "2024-01-01"}],
        }
    )

    bundle = JsonDataFileCodec(logger=logger).decode(text)

    assert [item.id for item in bundle.transactions] == ["t2"]
    assert bundle.budgets == []
    assert bundle.skipped_rows == 3
    assert logger.warning.call_count == 3


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"somethingElse": []}),
        json.dumps({"accounts": {"id": "a1"}}),
    ],
)
def test_decode_rejects_unusable_documents(text):
    """Invalid or unrelated documents raise DataFileError."""
    with pytest.raises(DataFileError):
        _codec().decode(text)


def test_decoded_transaction_matches_encoded_one():
    """A transaction written by the codec reads back unchanged."""
    transaction = Transaction(
        id="t9",
        date=datetime(2024, 2, 29, 18, 45),
        amount=Decimal("60"),
        description="Dinner",
        type=TransactionType.EXPENSE,
        category_id="c2",
        from_account=AccountType.CREDIT,
        is_split=True,
        friend_name="Alex",
        friend_amount=Decimal("30"),
        user_amount=Decimal("30"),
    )

    text = _codec().encode(FinanceBundle(transactions=[transaction]))

    assert _codec().decode(text).transactions == [transaction]

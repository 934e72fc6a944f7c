"""Tests for transaction filtering."""

import pytest

from zenbudget.domain.search import filter_transactions, normalize_search_term


@pytest.fixture
def ledger(store):
    """Store with a mix of names, categories and kinds."""
    store.append("Salary", 3500, "Income")
    store.append("Rent", -1200, "Rent")
    store.append("Groceries", -150, "Food")
    store.append("Seafood Dinner", -80, "Fun")
    store.append("Food truck refund", 12, "Other")
    return store


def _names(transactions):
    return [txn.name for txn in transactions]


def test_empty_term_returns_everything_in_order(ledger):
    records = ledger.records
    result = filter_transactions(records, "")
    assert result == list(records)


def test_empty_term_returns_a_new_list(ledger):
    records = list(ledger.records)
    result = filter_transactions(records, "")
    assert result is not records
    result.pop()
    assert len(records) == len(ledger)


@pytest.mark.parametrize("term", ["   ", "\t", None])
def test_blank_term_is_treated_as_empty(ledger, term):
    assert filter_transactions(ledger.records, term) == list(ledger.records)


def test_matches_category_and_name_case_insensitively(ledger):
    result = filter_transactions(ledger.records, "food")
    assert _names(result) == ["Food truck refund", "Seafood Dinner", "Groceries"]


def test_matches_kind(ledger):
    result = filter_transactions(ledger.records, "INCOME")
    # Salary by category and kind, the refund by kind only
    assert _names(result) == ["Food truck refund", "Salary"]

    expenses = filter_transactions(ledger.records, "expense")
    assert _names(expenses) == ["Seafood Dinner", "Groceries", "Rent"]


def test_term_is_trimmed(ledger):
    assert _names(filter_transactions(ledger.records, "  rent ")) == ["Rent"]


def test_substring_not_tokenized(ledger):
    assert _names(filter_transactions(ledger.records, "ocer")) == ["Groceries"]
    assert filter_transactions(ledger.records, "groceries food") == []


def test_no_match_returns_empty(ledger):
    assert filter_transactions(ledger.records, "zzz") == []


def test_empty_input():
    assert filter_transactions([], "food") == []
    assert filter_transactions([], "") == []


def test_result_is_subset_by_identity(ledger):
    records = ledger.records
    for txn in filter_transactions(records, "o"):
        assert any(txn is original for original in records)


@pytest.mark.parametrize("term", ["", "food", "income", "e", "nothing"])
def test_filter_is_idempotent(ledger, term):
    once = filter_transactions(ledger.records, term)
    assert filter_transactions(once, term) == once


def test_normalize_search_term():
    assert normalize_search_term("  FooD ") == "food"
    assert normalize_search_term(None) == ""

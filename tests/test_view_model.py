"""Tests for the ledger view model."""

from decimal import Decimal

from zenbudget.domain.category import DEFAULT_CATEGORY_STYLE, get_category_style
from zenbudget.domain.entities import CategoryBreakdownItem, Totals, TransactionKind
from zenbudget.domain.summary import compute_category_breakdown, compute_totals
from zenbudget.domain.view_model import BalanceState, build_balance_view, build_category_bar, build_ledger_view
from zenbudget.utils.currency import format_timestamp


def test_build_ledger_view(scenario_store):
    records = scenario_store.records
    view = build_ledger_view(records, compute_totals(records), compute_category_breakdown(records))

    assert [row.name for row in view.rows] == ["Rent", "Salary"]
    rent, salary = view.rows
    assert rent.amount_label == "-$1,200.00"
    assert rent.kind is TransactionKind.EXPENSE
    assert rent.style == get_category_style("Rent")
    assert rent.date_label == format_timestamp(records[0].date)
    assert salary.amount_label == "+$3,500.00"

    assert view.balance.balance_label == "$2,300.00"
    assert view.balance.income_label == "$3,500.00"
    assert view.balance.expense_label == "$1,200.00"
    assert view.balance.state is BalanceState.POSITIVE

    assert len(view.bars) == 1
    assert view.bars[0].category == "Rent"
    assert view.bars[0].percentage_label == "100.0%"
    assert not view.is_empty_list
    assert not view.is_empty_summary


def test_empty_view():
    view = build_ledger_view([], Totals(), [])
    assert view.is_empty_list
    assert view.is_empty_summary
    assert view.balance.balance_label == "$0.00"
    assert view.balance.state is BalanceState.ZERO


def test_negative_balance_state():
    balance = build_balance_view(
        Totals(income=Decimal("100"), expense=Decimal("250.5"), balance=Decimal("-150.5"))
    )
    assert balance.state is BalanceState.NEGATIVE
    assert balance.balance_label == "-$150.50"
    assert balance.expense_label == "$250.50"


def test_category_bar_formats_percentage_and_falls_back_on_style():
    bar = build_category_bar(
        CategoryBreakdownItem(category="Transport", amount=Decimal("33.333"), percentage=33.3333)
    )
    assert bar.amount_label == "$33.33"
    assert bar.percentage_label == "33.3%"
    assert bar.percentage == 33.3333
    assert bar.style == DEFAULT_CATEGORY_STYLE

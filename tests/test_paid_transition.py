"""Unit tests for the paid/paid_date transition rule."""

from datetime import date

from apps.biztime.services.invoice_service import resolve_paid_date

TODAY = date(2024, 3, 15)
EARLIER = date(2024, 1, 2)


def test_unpaid_to_paid_sets_today():
    assert resolve_paid_date(False, None, True, TODAY) == TODAY


def test_paid_to_paid_keeps_date():
    assert resolve_paid_date(True, EARLIER, True, TODAY) == EARLIER


def test_paid_to_unpaid_clears_date():
    assert resolve_paid_date(True, EARLIER, False, TODAY) is None


def test_unpaid_to_unpaid_stays_null():
    assert resolve_paid_date(False, None, False, TODAY) is None


def test_paid_row_without_date_gets_today():
    assert resolve_paid_date(True, None, True, TODAY) == TODAY


def test_stale_date_on_unpaid_row_is_replaced():
    assert resolve_paid_date(False, EARLIER, True, TODAY) == TODAY
    assert resolve_paid_date(False, EARLIER, False, TODAY) is None

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from sales_api.modules.sales.repository import SalesRepository
from sales_api.modules.sales.schemas import SaleCreateRequest, SaleFilters, SaleUpdateRequest
from sales_api.modules.sales.service import SalesService
from sales_api.shared.responses import Outcome, ResponseMessages


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def service(db):
    return SalesService(db)


@pytest.fixture
def seeded_sales(service):
    rows = [
        (Decimal("100.00"), utc(2024, 1, 1), 5),
        (Decimal("200.00"), utc(2024, 1, 15), 5),
        (Decimal("300.00"), utc(2024, 1, 31), 7),
        (Decimal("400.00"), utc(2024, 2, 10), 5),
        (Decimal("500.00"), utc(2024, 3, 1), 9),
    ]
    created = []
    for amount, sale_date, rep in rows:
        result = service.create_sale(
            SaleCreateRequest(amount=amount, sale_date=sale_date, representative_id=rep)
        )
        created.append(result.data)
    return created


def test_create_then_get_returns_same_amount_and_representative(service):
    created = service.create_sale(
        SaleCreateRequest(amount=Decimal("125.50"), sale_date=utc(2024, 5, 1), representative_id=3)
    )

    assert created.outcome == Outcome.CREATED
    assert created.message == ResponseMessages.ADDED

    fetched = service.get_sale(created.data.id)
    assert fetched.outcome == Outcome.SUCCESS
    assert fetched.data.amount == Decimal("125.50")
    assert fetched.data.representative_id == 3


def test_get_missing_sale_is_not_found(service):
    result = service.get_sale(9999)

    assert result.outcome == Outcome.NOT_FOUND
    assert result.data is None
    assert result.status_code == 404


def test_get_all_on_empty_store_is_an_empty_list(service):
    result = service.get_all_sales()

    assert result.outcome == Outcome.SUCCESS
    assert result.data == []


def test_get_all_lists_every_sale(service, seeded_sales):
    result = service.get_all_sales()

    assert [s.id for s in result.data] == [s.id for s in seeded_sales]


def test_delete_then_get_is_not_found(service, seeded_sales):
    target = seeded_sales[0]

    deleted = service.delete_sale(target.id)
    assert deleted.outcome == Outcome.SUCCESS
    assert deleted.message == ResponseMessages.DELETED
    assert deleted.data.id == target.id
    assert deleted.data.amount == target.amount

    assert service.get_sale(target.id).outcome == Outcome.NOT_FOUND


def test_delete_missing_sale_is_not_found(service):
    assert service.delete_sale(42).outcome == Outcome.NOT_FOUND


def test_update_changes_stored_values_and_timestamp(service, seeded_sales):
    target = seeded_sales[0]
    before = datetime.now(timezone.utc).replace(tzinfo=None)

    result = service.update_sale(
        target.id, SaleUpdateRequest(amount=Decimal("999.99"), representative_id=11)
    )

    assert result.outcome == Outcome.SUCCESS
    assert result.message == ResponseMessages.MODIFIED
    # The canonical stored record comes back, not the request body
    assert result.data.id == target.id
    assert result.data.sale_date == target.sale_date

    stored = service.get_sale(target.id).data
    assert stored.amount == Decimal("999.99")
    assert stored.representative_id == 11
    assert stored.updated_at.replace(tzinfo=None) >= before


def test_update_missing_sale_is_not_found(service):
    result = service.update_sale(77, SaleUpdateRequest(amount=Decimal("1.00"), representative_id=1))

    assert result.outcome == Outcome.NOT_FOUND


def test_filter_by_representative_only(service, seeded_sales):
    result = service.get_sales_by_filters(SaleFilters(representative_id=5))

    assert result.outcome == Outcome.SUCCESS
    assert len(result.data) == 3
    assert {s.representative_id for s in result.data} == {5}


def test_filter_by_date_range_ignores_non_positive_representative(service, seeded_sales):
    result = service.get_sales_by_filters(
        SaleFilters(start_date=utc(2024, 1, 1), end_date=utc(2024, 1, 31), representative_id=0)
    )

    # Both bounds are inclusive
    assert sorted(s.amount for s in result.data) == [Decimal("100.00"), Decimal("200.00"), Decimal("300.00")]
    assert {s.representative_id for s in result.data} == {5, 7}


def test_filter_by_date_range_and_representative(service, seeded_sales):
    result = service.get_sales_by_filters(
        SaleFilters(start_date=utc(2024, 1, 1), end_date=utc(2024, 2, 28), representative_id=5)
    )

    assert sorted(s.amount for s in result.data) == [Decimal("100.00"), Decimal("200.00"), Decimal("400.00")]


def test_filter_with_a_single_date_uses_representative_only(service, seeded_sales):
    result = service.get_sales_by_filters(SaleFilters(start_date=utc(2024, 2, 1), representative_id=9))

    assert [s.amount for s in result.data] == [Decimal("500.00")]


def test_filter_without_dates_or_representative_is_invalid(service, seeded_sales):
    result = service.get_sales_by_filters(SaleFilters(representative_id=-3))

    assert result.outcome == Outcome.INVALID_INPUT
    assert result.status_code == 400


def test_filter_with_reversed_range_is_invalid(service):
    result = service.get_sales_by_filters(
        SaleFilters(start_date=utc(2024, 2, 1), end_date=utc(2024, 1, 1))
    )

    assert result.outcome == Outcome.INVALID_INPUT


def test_filter_with_no_matches_is_an_empty_list(service, seeded_sales):
    result = service.get_sales_by_filters(SaleFilters(representative_id=123))

    assert result.outcome == Outcome.SUCCESS
    assert result.data == []


def test_store_failure_becomes_persistence_failure(service, monkeypatch):
    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is gone"))

    monkeypatch.setattr(SalesRepository, "get_all", broken)

    result = service.get_all_sales()

    assert result.outcome == Outcome.PERSISTENCE_FAILURE
    assert result.message == ResponseMessages.EXCEPTION
    assert result.status_code == 500


def test_envelope_flags_follow_outcome(service):
    envelope = service.get_sale(1).to_envelope()

    assert envelope.is_success is False
    assert envelope.is_error is True
    assert envelope.data is None

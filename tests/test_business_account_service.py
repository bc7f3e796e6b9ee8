"""Tests for business account service functions."""

from app.models.business import BusinessAccount
from app.services.business_account_service import (
    create_business_account,
    get_business_account,
    update_business_account,
)


def test_get_account_missing(db_session, sample_business):
    assert get_business_account(db_session, sample_business.id) is None


def test_create_account_keeps_only_credentials(db_session, sample_business):
    account = create_business_account(
        db_session,
        sample_business.id,
        {"statistics_id": "S1", "name": "not a credential"},
    )

    assert account.business_id == sample_business.id
    assert account.statistics_id == "S1"
    assert account.created_at is not None


def test_update_account_creates_when_missing(db_session, sample_business):
    """Test the first update inserts the account row."""
    account = update_business_account(db_session, sample_business.id, {"tax_account_id": "T1"})

    assert account.tax_account_id == "T1"
    assert db_session.query(BusinessAccount).count() == 1


def test_update_account_twice_keeps_one_row(db_session, sample_business):
    """Test repeated updates change the same row."""
    first = update_business_account(db_session, sample_business.id, {"tax_account_id": "T1"})
    second = update_business_account(
        db_session, sample_business.id, {"tax_account_id": "T2", "token_pass": "secret"}
    )

    assert second.id == first.id
    assert second.tax_account_id == "T2"
    assert second.token_pass == "secret"
    assert db_session.query(BusinessAccount).filter_by(business_id=sample_business.id).count() == 1


def test_update_account_leaves_other_fields(db_session, sample_business):
    create_business_account(db_session, sample_business.id, {"web_invoice_id": "W1", "web_invoice_pass": "p"})

    account = update_business_account(db_session, sample_business.id, {"web_invoice_pass": "p2"})

    assert account.web_invoice_id == "W1"
    assert account.web_invoice_pass == "p2"

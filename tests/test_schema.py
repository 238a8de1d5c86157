"""
Unit tests for transaction schemas.
"""
import pytest
from pydantic import ValidationError

from core.schema import Transaction, TransactionSummary


def test_transaction_from_source_keys():
    """Test camelCase keys of the source data are accepted."""
    txn = Transaction.model_validate({
        "mtn": 663458,
        "amount": 430.2,
        "senderFullName": "Tom Shelby",
        "senderAge": 22,
        "beneficiaryFullName": "Alfie Solomons",
        "beneficiaryAge": 33,
        "issueId": 1,
        "issueSolved": False,
        "issueMessage": "Looks like money laundering",
    })
    assert txn.sender_full_name == "Tom Shelby"
    assert txn.beneficiary_full_name == "Alfie Solomons"
    assert txn.issue_id == 1
    assert txn.issue_solved is False
    assert txn.issue_message == "Looks like money laundering"


def test_transaction_by_field_name():
    """Test snake_case field names are accepted."""
    txn = Transaction(amount=10.0, sender_full_name="A", beneficiary_full_name="B")
    assert txn.amount == 10.0
    assert txn.issue_id is None
    assert txn.issue_solved is True
    assert txn.issue_message is None


def test_transaction_issue_id_normalization():
    """Test string and empty issue ids."""
    assert Transaction(
        amount=1.0, sender_full_name="A", beneficiary_full_name="B", issue_id="7"
    ).issue_id == 7
    assert Transaction(
        amount=1.0, sender_full_name="A", beneficiary_full_name="B", issue_id=""
    ).issue_id is None


def test_transaction_is_immutable():
    """Test transactions cannot be modified."""
    txn = Transaction(amount=10.0, sender_full_name="A", beneficiary_full_name="B")
    with pytest.raises(ValidationError):
        txn.amount = 20.0


def test_transaction_requires_names():
    """Test missing sender is rejected."""
    with pytest.raises(ValidationError):
        Transaction.model_validate({"amount": 1.0, "beneficiaryFullName": "B"})


def test_transaction_ignores_unknown_keys():
    """Test extra keys in source records are ignored."""
    txn = Transaction.model_validate({
        "amount": 1.0,
        "senderFullName": "A",
        "beneficiaryFullName": "B",
        "channel": "web",
    })
    assert not hasattr(txn, "channel")


def test_summary_rejects_negative_counts():
    """Test summary count validation."""
    with pytest.raises(ValidationError):
        TransactionSummary(transaction_count=-1, total_amount=0.0, unique_clients=0)

"""
Unit tests for custom exceptions.
"""
from core.exceptions import (
    TransactionQueryException,
    EmptyTransactionsError,
    ValidationError,
    ConfigurationError,
)


def test_base_exception():
    """Test base exception class."""
    exc = TransactionQueryException("Test error", details={"key": "value"})
    assert str(exc) == "Test error"
    assert exc.message == "Test error"
    assert exc.details == {"key": "value"}


def test_exception_hierarchy():
    """Test exception inheritance."""
    assert issubclass(EmptyTransactionsError, TransactionQueryException)
    assert issubclass(ValidationError, TransactionQueryException)
    assert issubclass(ConfigurationError, TransactionQueryException)


def test_exception_with_details():
    """Test exception with details dictionary."""
    exc = EmptyTransactionsError(
        "Transaction list is empty",
        details={"operation": "get_max_transaction_amount"}
    )
    assert exc.message == "Transaction list is empty"
    assert exc.details["operation"] == "get_max_transaction_amount"


def test_exception_without_details():
    """Test exception without details."""
    exc = ValidationError("Limit must not be negative")
    assert exc.message == "Limit must not be negative"
    assert exc.details == {}

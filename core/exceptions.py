"""
Custom exceptions for transaction query errors.
"""
from typing import Any, Dict, Optional


class TransactionQueryException(Exception):
    """Base exception for all transaction query errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EmptyTransactionsError(TransactionQueryException):
    """Raised when an operation needs at least one transaction but the list is empty."""
    pass


class ValidationError(TransactionQueryException):
    """Raised when a query argument is invalid."""
    pass


class ConfigurationError(TransactionQueryException):
    """Raised when configuration is invalid."""
    pass

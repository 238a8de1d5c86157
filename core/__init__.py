"""
Core modules for the transaction query service.

This package contains:
- config: Application configuration and settings
- exceptions: Custom exception classes
- logger: Logging configuration
- schema: Pydantic models for transactions and reports
"""

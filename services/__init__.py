"""
Service layer for business logic.

This package contains the query service that answers aggregate
statistics and lookup questions over a loaded transaction list.
"""

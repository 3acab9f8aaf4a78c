"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives
its repository through the constructor, so handlers and tests can
swap the persistence layer without touching the logic.
"""

from .category_service import CategoryService
from .transaction_service import TransactionService

__all__ = ["CategoryService", "TransactionService"]

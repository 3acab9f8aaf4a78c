"""
Service layer for transactions.

Transactions belong to a user and, optionally, to one of that user's
categories.  Besides plain CRUD the service offers a paginated
listing (newest first) and a per-type total used for income/expense
summaries.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from finance_tracker_api.app.core.exceptions import BadRequestException, NotFoundException
from finance_tracker_api.app.models import Transaction, TransactionType
from finance_tracker_api.app.repositories import DeleteResult, Repository, UpdateResult
from finance_tracker_api.app.schemas.transaction import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)


class TransactionService:
    """Service class for managing a user's transactions."""

    def __init__(self, transaction_repository: Repository[Transaction]) -> None:
        self.transaction_repository = transaction_repository

    async def create(self, data: TransactionCreate, user_id: int) -> Transaction:
        """Record a new transaction for ``user_id``.

        A category is mandatory on creation even though the column is
        nullable; it only becomes ``NULL`` when the category is deleted
        later on.
        """
        if data.category_id is None:
            raise BadRequestException("Category is required")

        transaction = self.transaction_repository.save(
            {
                "title": data.title,
                "amount": data.amount,
                "type": data.type,
                "category": {"id": data.category_id},
                "user": {"id": user_id},
            }
        )
        if not transaction:
            raise BadRequestException("Something went wrong...")
        logger.info("Created transaction %s for user %s", transaction.id, user_id)
        return transaction

    async def find_all(self, user_id: int) -> List[Transaction]:
        return self.transaction_repository.find(
            where={"user": {"id": user_id}},
            order={"created_at": "DESC", "id": "DESC"},
        )

    async def find_one(self, transaction_id: int) -> Transaction:
        transaction = self.transaction_repository.find_one(
            where={"id": transaction_id},
            relations={"user": True, "category": True},
        )
        if transaction is None:
            raise NotFoundException("Transaction not found")
        return transaction

    async def update(self, transaction_id: int, data: TransactionUpdate) -> UpdateResult:
        transaction = self.transaction_repository.find_one(where={"id": transaction_id})
        if transaction is None:
            logger.warning("Update of missing transaction %s rejected", transaction_id)
            raise NotFoundException("Transaction not found")

        values = data.model_dump(exclude_unset=True)
        if not values:
            raise BadRequestException("Nothing to update")

        result = self.transaction_repository.update(transaction_id, values)
        logger.info("Updated transaction %s", transaction_id)
        return result

    async def remove(self, transaction_id: int) -> DeleteResult:
        transaction = self.transaction_repository.find_one(where={"id": transaction_id})
        if transaction is None:
            logger.warning("Removal of missing transaction %s rejected", transaction_id)
            raise NotFoundException("Transaction not found")

        result = self.transaction_repository.delete(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)
        return result

    async def find_all_with_pagination(self, user_id: int, page: int, limit: int) -> List[Transaction]:
        """Return one page of the user's transactions, newest first.

        ``page`` is 1-based.
        """
        if page < 1 or limit < 1:
            raise BadRequestException("Page and limit must be positive")

        return self.transaction_repository.find(
            where={"user": {"id": user_id}},
            relations={"user": True, "category": True},
            order={"created_at": "DESC", "id": "DESC"},
            take=limit,
            skip=(page - 1) * limit,
        )

    async def find_all_by_type(self, user_id: int, transaction_type: str) -> Decimal:
        """Return the total amount of the user's transactions of ``transaction_type``."""
        try:
            kind = TransactionType(transaction_type)
        except ValueError:
            raise BadRequestException(f"Unknown transaction type {transaction_type!r}") from None

        transactions = self.transaction_repository.find_by(
            {"user": {"id": user_id}, "type": kind.value}
        )
        return sum((Decimal(t.amount) for t in transactions), Decimal("0"))

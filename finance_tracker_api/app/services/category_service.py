"""
Service layer for categories.

Categories are owned by a single user and their titles are unique per
user.  Every write is preceded by an existence check so a missing or
duplicate record surfaces as an HTTP-style exception instead of a
silent no-op.  Persistence is delegated to a generic ``Repository``
bound to the ``Category`` model.
"""

from __future__ import annotations

import logging
from typing import List

from finance_tracker_api.app.core.exceptions import BadRequestException, NotFoundException
from finance_tracker_api.app.models import Category
from finance_tracker_api.app.repositories import DeleteResult, Repository, UpdateResult
from finance_tracker_api.app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """Service class for managing a user's categories."""

    def __init__(self, category_repository: Repository[Category]) -> None:
        self.category_repository = category_repository

    async def create(self, data: CategoryCreate, user_id: int) -> Category:
        """Create a category for ``user_id``.

        Raises ``BadRequestException`` if the user already has a
        category with the same title.
        """
        existing = self.category_repository.find_by(
            {"user": {"id": user_id}, "title": data.title}
        )
        if existing:
            logger.warning("User %s already has category %r", user_id, data.title)
            raise BadRequestException("This category already exists!")

        category = self.category_repository.save(
            {"title": data.title, "user": {"id": user_id}}
        )
        logger.info("Created category %s for user %s", category.id, user_id)
        return category

    async def find_all(self, user_id: int) -> List[Category]:
        """Return all categories of ``user_id`` with their transactions loaded."""
        return self.category_repository.find(
            where={"user": {"id": user_id}},
            relations={"transactions": True},
        )

    async def find_one(self, category_id: int) -> Category:
        category = self.category_repository.find_one(
            where={"id": category_id},
            relations={"user": True, "transactions": True},
        )
        if category is None:
            raise NotFoundException("Category not found")
        return category

    async def update(self, category_id: int, data: CategoryUpdate) -> UpdateResult:
        """Apply the fields set on ``data`` to an existing category."""
        category = self.category_repository.find_one(where={"id": category_id})
        if category is None:
            logger.warning("Update of missing category %s rejected", category_id)
            raise NotFoundException("Category not found")

        values = data.model_dump(exclude_unset=True)
        if not values:
            raise BadRequestException("Nothing to update")

        if "title" in values:
            clashes = [
                other
                for other in self.category_repository.find_by(
                    {"user": {"id": category.user_id}, "title": values["title"]}
                )
                if other.id != category_id
            ]
            if clashes:
                logger.warning("User %s already has category %r", category.user_id, values["title"])
                raise BadRequestException("This category already exists!")

        result = self.category_repository.update(category_id, values)
        logger.info("Updated category %s", category_id)
        return result

    async def remove(self, category_id: int) -> DeleteResult:
        category = self.category_repository.find_one(where={"id": category_id})
        if category is None:
            logger.warning("Removal of missing category %s rejected", category_id)
            raise NotFoundException("Category not found")

        result = self.category_repository.delete(category_id)
        logger.info("Deleted category %s", category_id)
        return result

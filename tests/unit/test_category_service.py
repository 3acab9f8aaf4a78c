from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from finance_tracker_api.app.core.exceptions import BadRequestException, NotFoundException
from finance_tracker_api.app.repositories import DeleteResult, Repository, UpdateResult
from finance_tracker_api.app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from finance_tracker_api.app.services.category_service import CategoryService


def make_category(category_id: int = 1, title: str = "Food", user_id: int = 1):
    now = datetime(2024, 1, 1, 12, 0, 0)
    return SimpleNamespace(
        id=category_id,
        title=title,
        user=SimpleNamespace(id=user_id),
        user_id=user_id,
        transactions=[],
        created_at=now,
        updated_at=now,
    )


@pytest.fixture()
def repository():
    return MagicMock(spec=Repository)


@pytest.fixture()
def service(repository):
    return CategoryService(repository)


# --- create -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_rejects_existing_title(service, repository):
    repository.find_by.return_value = [make_category()]

    with pytest.raises(BadRequestException) as exc:
        await service.create(CategoryCreate(title="Food"), 1)

    assert exc.value.status_code == 400
    assert exc.value.detail == "This category already exists!"
    repository.save.assert_not_called()


@pytest.mark.asyncio
async def test_create_saves_new_category(service, repository):
    new_category = make_category()
    repository.find_by.return_value = []
    repository.save.return_value = new_category

    result = await service.create(CategoryCreate(title="Food"), 1)

    assert result is new_category
    repository.find_by.assert_called_once_with({"user": {"id": 1}, "title": "Food"})
    repository.save.assert_called_once_with({"title": "Food", "user": {"id": 1}})


def test_create_schema_strips_blank_titles():
    assert CategoryCreate(title="  Food ").title == "Food"
    with pytest.raises(ValueError):
        CategoryCreate(title="   ")


# --- find_one ---------------------------------------------------------------


@pytest.mark.asyncio
async def test_find_one_returns_category(service, repository):
    category = make_category()
    repository.find_one.return_value = category

    result = await service.find_one(1)

    assert result is category
    repository.find_one.assert_called_once_with(
        where={"id": 1},
        relations={"user": True, "transactions": True},
    )


@pytest.mark.asyncio
async def test_find_one_raises_when_missing(service, repository):
    repository.find_one.return_value = None

    with pytest.raises(NotFoundException) as exc:
        await service.find_one(1)

    assert exc.value.status_code == 404


# --- update -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_update_raises_when_missing(service, repository):
    repository.find_one.return_value = None

    with pytest.raises(NotFoundException):
        await service.update(1, CategoryUpdate(title="Updated Food"))

    repository.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_writes_provided_fields(service, repository):
    repository.find_one.return_value = make_category()
    repository.find_by.return_value = []
    repository.update.return_value = UpdateResult(affected=1)

    result = await service.update(1, CategoryUpdate(title="Updated Food"))

    assert result == UpdateResult(affected=1)
    repository.update.assert_called_once_with(1, {"title": "Updated Food"})


@pytest.mark.asyncio
async def test_update_without_fields_is_rejected(service, repository):
    repository.find_one.return_value = make_category()

    with pytest.raises(BadRequestException):
        await service.update(1, CategoryUpdate())

    repository.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_rejects_title_taken_by_another_category(service, repository):
    repository.find_one.return_value = make_category(2, "Travel")
    repository.find_by.return_value = [make_category(1, "Food")]

    with pytest.raises(BadRequestException) as exc:
        await service.update(2, CategoryUpdate(title="Food"))

    assert exc.value.detail == "This category already exists!"
    repository.find_by.assert_called_once_with({"user": {"id": 1}, "title": "Food"})
    repository.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_allows_keeping_own_title(service, repository):
    repository.find_one.return_value = make_category(1, "Food")
    repository.find_by.return_value = [make_category(1, "Food")]
    repository.update.return_value = UpdateResult(affected=1)

    assert await service.update(1, CategoryUpdate(title=" Food ")) == UpdateResult(affected=1)
    repository.update.assert_called_once_with(1, {"title": "Food"})


@pytest.mark.parametrize("payload", [{"title": "   "}, {"title": None}, {"title": ""}])
def test_update_schema_rejects_blank_or_null_title(payload):
    with pytest.raises(ValueError):
        CategoryUpdate.model_validate(payload)


# --- remove -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_remove_raises_when_missing(service, repository):
    repository.find_one.return_value = None

    with pytest.raises(NotFoundException):
        await service.remove(1)

    repository.delete.assert_not_called()


@pytest.mark.asyncio
async def test_remove_deletes_existing_category(service, repository):
    repository.find_one.return_value = make_category()
    repository.delete.return_value = DeleteResult(affected=1)

    result = await service.remove(1)

    assert result == DeleteResult(affected=1)
    repository.delete.assert_called_once_with(1)


# --- find_all ---------------------------------------------------------------


@pytest.mark.asyncio
async def test_find_all_returns_user_categories_with_transactions(service, repository):
    categories = [make_category(1, "Food"), make_category(2, "Travel")]
    repository.find.return_value = categories

    result = await service.find_all(1)

    assert result == categories
    repository.find.assert_called_once_with(
        where={"user": {"id": 1}},
        relations={"transactions": True},
    )


def test_read_schema_keeps_transaction_amount_precision():
    category = make_category()
    category.transactions = [
        SimpleNamespace(id=1, title="Lunch", type="expense", amount=Decimal("12.34"))
    ]

    read = CategoryRead.model_validate(category)

    assert read.transactions[0].amount == Decimal("12.34")
    assert isinstance(read.transactions[0].amount, Decimal)

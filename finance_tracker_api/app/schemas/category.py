"""
Pydantic schemas for categories.

A category is a user-owned label (e.g. "Food", "Travel") that
transactions can be filed under.  Titles are unique per user; that
rule is enforced by ``CategoryService``, not here.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from . import normalize_title


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    title: str = Field(..., min_length=1, examples=["Food"])

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return normalize_title(v)


class CategoryUpdate(BaseModel):
    """Schema for updating a category.

    All fields are optional; only provided values will be updated.  A
    title that is sent must still be a non-blank string.
    """

    title: Optional[str] = Field(None, min_length=1, examples=["Groceries"])

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Optional[str]):
        return normalize_title(v)


class CategoryTransactionRead(BaseModel):
    id: int
    title: str
    type: str
    amount: Decimal

    model_config = {"from_attributes": True}


class CategoryRead(BaseModel):
    """Schema for reading a category."""

    id: int
    title: str
    user_id: int
    transactions: List[CategoryTransactionRead] = []
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

"""
Pydantic models for transaction data.

A transaction records money coming in (``income``) or going out
(``expense``).  Amounts are always positive; the direction is carried
by ``type``.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from finance_tracker_api.app.models import TransactionType

from . import normalize_title


class TransactionBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Salary"])
    amount: Decimal = Field(..., gt=0, examples=[1500.0])
    type: TransactionType = Field(..., examples=["income"])

    model_config = {"use_enum_values": True}


class TransactionCreate(TransactionBase):
    """Schema for creating a transaction."""

    category_id: Optional[int] = Field(None, examples=[1], description="Category the transaction is filed under")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return normalize_title(v)


class TransactionUpdate(BaseModel):
    """Schema for updating a transaction.  Only provided values are written.

    ``category_id`` may be sent as ``null`` to detach the transaction;
    the other fields are NOT NULL columns and reject an explicit null.
    """

    title: Optional[str] = Field(None, min_length=1)
    amount: Optional[Decimal] = Field(None, gt=0)
    type: Optional[TransactionType] = None
    category_id: Optional[int] = None

    model_config = {"use_enum_values": True}

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v: Optional[str]):
        return normalize_title(v)

    @field_validator("amount", "type", mode="before")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} must not be null")
        return v


class TransactionRead(TransactionBase):
    """Schema for reading a transaction."""

    id: int
    user_id: int
    category_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
        "use_enum_values": True,
    }

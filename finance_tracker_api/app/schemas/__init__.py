"""
Pydantic schema definitions.

Each domain (categories, transactions) defines its own models for
create/update input and read output.  Schemas are separated from the
ORM models to decouple representation from persistence.
"""

from typing import Optional


def normalize_title(value: Optional[str]):
    """Strip surrounding whitespace; blank or null titles are rejected."""
    if value is None:
        raise ValueError("Title must not be null")
    if not isinstance(value, str):
        return value  # left to the field type check
    value = value.strip()
    if not value:
        raise ValueError("Title must not be blank")
    return value

"""
Persistence layer.

Services receive a :class:`Repository` bound to a session and a model
class and never build SQL themselves.
"""

from .base import DeleteResult, Repository, UpdateResult

__all__ = ["Repository", "UpdateResult", "DeleteResult"]

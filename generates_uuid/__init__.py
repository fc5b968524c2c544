"""Automatic UUID assignment for SQLAlchemy models."""

from generates_uuid.assigner import UuidAssigner, UuidVersion
from generates_uuid.models.base import GeneratesUuid

__version__ = "0.1.0"

__all__ = [
    "GeneratesUuid",
    "UuidAssigner",
    "UuidVersion",
]

"""Model mixin that assigns a UUID to every new row.

Any declarative model inheriting :class:`GeneratesUuid` gets a ``uuid``
column and, right before its first INSERT, a generated value for it.  A value
set by the caller is kept (lower-cased) instead of being replaced.

Storage is chosen per model: list ``"uuid"`` in ``binary_casts`` to persist
the raw 16 bytes, otherwise the canonical string is stored.  Reading
``instance.uuid`` always yields the canonical string.
"""
from __future__ import annotations

from typing import Any, ClassVar
from uuid import UUID

from sqlalchemy import LargeBinary, String, event
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, Mapper, declared_attr, mapped_column

from generates_uuid.assigner import UUID_FIELD, UuidAssigner, UuidVersion


class GeneratesUuid:
    """Mixin that adds a generated ``uuid`` column."""

    # One of "uuid1", "uuid3", "uuid4", "uuid5"; anything else means uuid4.
    uuid_version: ClassVar[str | None] = None
    # Fields persisted as raw bytes.
    binary_casts: ClassVar[frozenset[str]] = frozenset()

    @declared_attr
    def _uuid(cls) -> Mapped[Any]:
        return mapped_column(
            UUID_FIELD,
            LargeBinary(16) if cls.has_cast(UUID_FIELD) else String(36),
            unique=True,
            index=True,
            nullable=False,
        )

    @hybrid_property
    def uuid(self) -> str | None:
        return self.cast_attribute(UUID_FIELD, self._uuid)

    @uuid.inplace.setter
    def _uuid_setter(self, value: Any) -> None:
        self._uuid = value

    @uuid.inplace.expression
    @classmethod
    def _uuid_expression(cls) -> Any:
        return cls._uuid

    # ------ configuration ------

    @classmethod
    def has_cast(cls, key: str) -> bool:
        return key in cls.binary_casts

    @classmethod
    def resolve_uuid_version(cls) -> UuidVersion:
        return UuidVersion.resolve(cls.uuid_version)

    @classmethod
    def uuid_assigner(cls) -> UuidAssigner:
        return UuidAssigner(
            version=cls.resolve_uuid_version(),
            binary=cls.has_cast(UUID_FIELD),
        )

    @classmethod
    def resolve_uuid(cls) -> UUID:
        """Return a fresh UUID of the configured version."""
        return cls.uuid_assigner().generate()

    # ------ queries ------

    @classmethod
    def where_uuid(cls, query: Any, value: str) -> Any:
        """Scope ``query`` (a ``select()`` or ``Query``) to the row with ``value``.

        Binary models compare against the encoded bytes; string models
        compare against ``value`` as given, so the match is case-sensitive.
        """
        return cls.uuid_assigner().where_uuid(query, cls.uuid, value)

    # ------ attribute casting ------

    def cast_attribute(self, key: str, value: Any) -> Any:
        if key != UUID_FIELD or value is None:
            return value
        if self.has_cast(key):
            return self.uuid_assigner().decode(value)
        if isinstance(value, UUID):
            return str(value)
        return value


@event.listens_for(GeneratesUuid, "before_insert", propagate=True)
def _assign_uuid(mapper: Mapper, connection: Any, target: GeneratesUuid) -> None:
    target.uuid_assigner().before_insert(target)

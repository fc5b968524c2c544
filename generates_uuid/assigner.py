"""UUID generation, normalisation and encoding for model ``uuid`` attributes.

A :class:`UuidAssigner` is configured with a :class:`UuidVersion` and a
storage flag:

* **binary** -- the value is persisted as its raw 16-byte form
* **string** -- the value is persisted as the canonical 36-character form
  (lowercase, hyphenated)

The assigner is stateless apart from that configuration, so one can be built
per call from a model class without any caching.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
import uuid
from collections.abc import Callable
from typing import Any

from generates_uuid.config import settings

logger = logging.getLogger(__name__)

UUID_FIELD = "uuid"


# ---------------------------------------------------------------------------
# Supported versions
# ---------------------------------------------------------------------------


class UuidVersion(str, enum.Enum):
    UUID1 = "uuid1"  # time + node
    UUID3 = "uuid3"  # name-based, MD5
    UUID4 = "uuid4"  # random
    UUID5 = "uuid5"  # name-based, SHA-1

    @classmethod
    def resolve(cls, value: Any) -> UuidVersion:
        """Return the version matching ``value``, or ``uuid4`` when unsupported."""
        for version in cls:
            if value == version.value:
                return version
        return cls.UUID4


def _name_token() -> str:
    return uuid.uuid4().hex


# Name-based versions hash a fresh token so every record still gets its own value.
GENERATORS: dict[UuidVersion, Callable[[], uuid.UUID]] = {
    UuidVersion.UUID1: uuid.uuid1,
    UuidVersion.UUID3: lambda: uuid.uuid3(settings.UUID_NAMESPACE, _name_token()),
    UuidVersion.UUID4: uuid.uuid4,
    UuidVersion.UUID5: lambda: uuid.uuid5(settings.UUID_NAMESPACE, _name_token()),
}


# ---------------------------------------------------------------------------
# Assigner
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class UuidAssigner:
    version: UuidVersion = UuidVersion.UUID4
    binary: bool = False
    # Instance attribute holding the raw (stored) value
    attribute: str = "_uuid"

    def generate(self) -> uuid.UUID:
        return GENERATORS[self.version]()

    def parse(self, value: Any) -> uuid.UUID:
        """Parse a caller-supplied UUID, case-insensitively.

        Raises ``ValueError`` for anything that is not a UUID string.
        """
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value).lower())

    def encode(self, value: uuid.UUID) -> bytes | str:
        return value.bytes if self.binary else str(value)

    def decode(self, raw: bytes | str | uuid.UUID | None) -> str | None:
        """Return the canonical string for a stored value."""
        if raw is None or isinstance(raw, str):
            # Pending records still hold the caller-supplied string.
            return raw
        if isinstance(raw, uuid.UUID):
            return str(raw)
        return str(uuid.UUID(bytes=bytes(raw)))

    def before_insert(self, record: Any) -> None:
        """Fill in (or normalise) the record's UUID ahead of its first INSERT.

        A value already present on the record wins over the freshly generated
        one; it is lower-cased and parsed, so a malformed value raises
        ``ValueError`` and aborts the flush.
        """
        value = self.generate()
        supplied = getattr(record, self.attribute, None)
        if supplied is not None:
            value = self.parse(supplied)
            logger.debug("Normalised supplied %s for %s", self.version.value, type(record).__name__)
        else:
            logger.debug("Generated %s for %s", self.version.value, type(record).__name__)

        setattr(record, self.attribute, self.encode(value))

    def where_uuid(self, query: Any, column: Any, value: str) -> Any:
        """Add ``column == value`` to ``query`` in the stored representation.

        The string path compares ``value`` exactly as given.
        """
        if self.binary:
            return query.where(column == self.parse(value).bytes)
        return query.where(column == value)

from generates_uuid.models.base import GeneratesUuid

__all__ = [
    "GeneratesUuid",
]

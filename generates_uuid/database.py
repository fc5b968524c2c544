"""Declarative base for models using :class:`~generates_uuid.GeneratesUuid`.

Engines and sessions belong to the application; the mixin only needs a
mapped class, so this module holds nothing but the shared ``Base``.
"""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass

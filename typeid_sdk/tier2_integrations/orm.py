"""
typeid_sdk.tier2_integrations.orm
──────────────────────────────────
SQLAlchemy column type for TypeIDs. The prefix lives in the column
definition; the database stores either the native 16-byte UUID (default) or
the full text form.

Usage:
    class User(Base):
        __tablename__ = "users"
        id: Mapped[TypeID] = mapped_column(
            TypeIDType("user"), primary_key=True, default=typeid_default("user")
        )

Minimal stack: SQLAlchemy 2.x
Configure via: TYPEID_ORM_STORAGE=uuid|text (default storage for new columns)
"""
from __future__ import annotations

import uuid
from typing import Any, Callable, Literal

from sqlalchemy import String, Uuid
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

from typeid_sdk.tier0_core.config import get_config
from typeid_sdk.tier0_core.errors import PrefixMismatchError
from typeid_sdk.tier0_core.logging import get_logger
from typeid_sdk.tier0_core.typeid import (
    MAX_PREFIX_LENGTH,
    TypeID,
    from_uuid,
    from_uuid_bytes,
    parse,
    validate_prefix,
)

logger = get_logger(__name__)

# prefix + separator + suffix
TEXT_LENGTH = MAX_PREFIX_LENGTH + 1 + 26


class TypeIDType(TypeDecorator):
    """Persist TypeIDs with a fixed prefix."""

    impl = Uuid
    cache_ok = True

    def __init__(self, prefix: str, storage: Literal["uuid", "text"] | None = None) -> None:
        self.prefix = validate_prefix(prefix).unwrap()
        self.storage = storage or get_config().orm_storage
        super().__init__()

    @property
    def python_type(self) -> type:
        return TypeID

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if self.storage == "text":
            return dialect.type_descriptor(String(TEXT_LENGTH))
        return dialect.type_descriptor(Uuid(as_uuid=True))

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        if isinstance(value, TypeID):
            if value.prefix != self.prefix:
                logger.warning("typeid.orm.prefix_rejected", expected=self.prefix, actual=value.prefix)
                raise PrefixMismatchError(self.prefix, value.prefix)
            tid = value
        else:
            tid = parse(value, self.prefix).unwrap()

        if self.storage == "text":
            return str(tid)
        return uuid.UUID(bytes=tid.uuid_bytes)

    def process_result_value(self, value: Any, dialect: Dialect) -> TypeID | None:
        if value is None:
            return None
        if self.storage == "text":
            return parse(value, self.prefix).unwrap()
        if isinstance(value, uuid.UUID):
            return from_uuid_bytes(self.prefix, value.bytes).unwrap()
        result = from_uuid(self.prefix, str(value))
        if not result.ok:
            logger.warning("typeid.orm.load_failed", prefix=self.prefix, value=repr(value))
        return result.unwrap()


def typeid_default(prefix: str) -> Callable[[], TypeID]:
    """Column default factory generating a fresh TypeID for ``prefix``."""
    validate_prefix(prefix).unwrap()

    def _generate() -> TypeID:
        return TypeID.new(prefix)

    return _generate


__all__ = ["TypeIDType", "typeid_default", "TEXT_LENGTH"]

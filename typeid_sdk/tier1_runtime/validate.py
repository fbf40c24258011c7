"""
typeid_sdk.tier1_runtime.validate
──────────────────────────────────────
Pydantic v2 field support. Annotate a field with TypeIDField to accept a
TypeID or its string form, enforce the prefix, and serialize back to a
string in JSON mode (python-mode dumps keep the TypeID):

    class Invite(BaseModel):
        id: Annotated[TypeID, TypeIDField("invite")]
        inviter: Annotated[TypeID, TypeIDField("user")]

Invalid input surfaces as a regular pydantic ValidationError, since every
TypeIDError is a ValueError.
"""
from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from typeid_sdk.tier0_core.errors import PrefixMismatchError
from typeid_sdk.tier0_core.typeid import TypeID, parse


class TypeIDField:
    """Annotated[] marker: ``prefix=None`` accepts any prefix."""

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = prefix

    def validate(self, value: Any) -> TypeID:
        if isinstance(value, TypeID):
            if self.prefix is not None and value.prefix != self.prefix:
                raise PrefixMismatchError(self.prefix, value.prefix)
            return value
        if isinstance(value, str):
            return parse(value, self.prefix).unwrap()
        raise ValueError(f"expected a TypeID or string, got {type(value).__name__}")

    @staticmethod
    def serialize(value: TypeID, info: core_schema.SerializationInfo) -> TypeID | str:
        # python mode keeps the instance so model_validate(model_dump()) round-trips
        return str(value) if info.mode == "json" else value

    def __get_pydantic_core_schema__(
        self, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self.serialize, info_arg=True
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema: dict[str, Any] = {"type": "string", "format": "typeid"}
        if self.prefix:
            json_schema["pattern"] = f"^{self.prefix}_[0-7][0-9a-hjkmnp-tv-z]{{25}}$"
        return json_schema

    def __repr__(self) -> str:
        return f"TypeIDField({self.prefix!r})"


__all__ = ["TypeIDField"]

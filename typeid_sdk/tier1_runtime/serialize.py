"""
typeid_sdk.tier1_runtime.serialize
───────────────────────────────────────
JSON encoding for TypeIDs. A TypeID always encodes as its canonical string,
so ``{"id": tid}`` becomes ``{"id": "user_01h45y0sxkfmntta78gqs1vsw6"}``.

Pydantic models carrying TypeIDField annotations serialize through
model_dump_json; plain structures go through dumps().
"""
from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from typeid_sdk.tier0_core.typeid import TypeID, parse


def json_default(obj: Any) -> Any:
    """``default=`` hook for json.dumps."""
    if isinstance(obj, TypeID):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class TypeIDJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder subclass for frameworks that take an encoder class."""

    def default(self, o: Any) -> Any:
        if isinstance(o, TypeID):
            return str(o)
        return super().default(o)


def dumps(obj: BaseModel | Any, **kwargs: Any) -> str:
    """
    Serialize to a JSON string.

    Usage:
        dumps({"id": TypeID.new("user")})   # → '{"id": "user_01h..."}'
        dumps(my_model)
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump_json(**kwargs)
    kwargs.setdefault("default", json_default)
    return json.dumps(obj, **kwargs)


def loads_typeid(data: bytes | str, expected_prefix: str | None = None) -> TypeID:
    """
    Decode a JSON string literal holding a TypeID. Raises TypeIDError.

    Usage:
        tid = loads_typeid('"user_01h45y0sxkfmntta78gqs1vsw6"', "user")
    """
    if isinstance(data, bytes):
        data = data.decode()
    return parse(json.loads(data), expected_prefix).unwrap()


__all__ = ["json_default", "TypeIDJSONEncoder", "dumps", "loads_typeid"]

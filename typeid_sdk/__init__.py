"""
typeid_sdk
────────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.

Framework adapters are imported from their own modules so the core never
pulls in a framework:

    from typeid_sdk.tier1_runtime.serialize import dumps, TypeIDJSONEncoder
    from typeid_sdk.tier1_runtime.validate import TypeIDField
    from typeid_sdk.tier2_integrations.orm import TypeIDType, typeid_default
"""
from typeid_sdk.tier0_core.typeid import (
    TypeID,
    ZERO_SUFFIX,
    compare,
    from_parts,
    from_uuid,
    from_uuid_bytes,
    is_typeid,
    is_valid,
    new,
    parse,
    validate_prefix,
    validate_suffix,
    zero,
)
from typeid_sdk.tier0_core.errors import (
    ErrorKind,
    TypeIDError,
    InvalidPrefixError,
    InvalidSuffixError,
    PrefixMismatchError,
    TypeIDParseError,
)
from typeid_sdk.tier0_core.result import Result
from typeid_sdk.tier0_core.config import get_config, TypeIDConfig
from typeid_sdk.tier0_core.logging import get_logger
from typeid_sdk.tier1_runtime.clock import Clock, get_clock, set_clock

__version__ = "0.1.0"
__all__ = [
    # typeid
    "TypeID", "ZERO_SUFFIX",
    "new", "zero", "from_parts", "from_uuid", "from_uuid_bytes", "parse",
    "validate_prefix", "validate_suffix",
    "is_typeid", "is_valid", "compare",
    # errors
    "ErrorKind", "TypeIDError", "InvalidPrefixError", "InvalidSuffixError",
    "PrefixMismatchError", "TypeIDParseError",
    # result
    "Result",
    # config
    "get_config", "TypeIDConfig",
    # logging
    "get_logger",
    # clock
    "Clock", "get_clock", "set_clock",
]

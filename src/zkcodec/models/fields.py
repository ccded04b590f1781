"""Pydantic field types for prefixed hex bytes and unsigned big integers.

Annotate a model field with one of these types to have it validated from,
and serialized to, its tagged external form::

    class BlockRecord(BaseModel):
        block_hash: SyncBlockBytes
        previous_hash: OptionalSyncBlockBytes = None
"""

from decimal import Decimal
from typing import Annotated, Any, Optional, Type

from pydantic import PlainSerializer, PlainValidator

from zkcodec.exceptions import FormatError
from zkcodec.storage.biguint import decimal_to_int, format_digits, int_to_biguint
from zkcodec.utils.encoding import (
    BytesToHex,
    OptionBytesToHex,
    Prefix,
    SyncBlockPrefix,
    SyncTxPrefix,
    ZeroxPrefix,
)


def hex_bytes(prefix: Type[Prefix]) -> Any:
    """
    Build a ``bytes`` field type serialized as a prefixed hex string.

    Raw bytes are accepted as-is when a model is constructed in Python.
    """
    codec = BytesToHex[prefix]

    def validate(value: Any) -> bytes:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        return codec.decode(value)

    return Annotated[bytes, PlainValidator(validate), PlainSerializer(codec.encode, return_type=str)]


def optional_hex_bytes(prefix: Type[Prefix]) -> Any:
    """Build an ``Optional[bytes]`` field type; None serializes as null."""
    codec = OptionBytesToHex[prefix]

    def validate(value: Any) -> Optional[bytes]:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        return codec.decode(value)

    return Annotated[
        Optional[bytes],
        PlainValidator(validate),
        PlainSerializer(codec.encode, return_type=Optional[str]),
    ]


def _validate_biguint(value: Any) -> int:
    if isinstance(value, bool):
        raise FormatError("Expected an unsigned integer, got bool")
    if isinstance(value, int):
        return int_to_biguint(value)
    if isinstance(value, str):
        # digits only; Decimal would also accept exponents and "NaN"
        if not value.isdigit() or not value.isascii():
            raise FormatError(f"Expected a decimal integer string, got {value!r}")
        # Decimal parses without the int-from-str digit limit
        return int(Decimal(value))
    if isinstance(value, Decimal):
        return int_to_biguint(decimal_to_int(value))
    raise FormatError(f"Expected an unsigned integer, got {type(value).__name__}")


def _serialize_biguint(value: int) -> str:
    return format_digits(value)


SyncBlockBytes = hex_bytes(SyncBlockPrefix)
ZeroxBytes = hex_bytes(ZeroxPrefix)
SyncTxBytes = hex_bytes(SyncTxPrefix)

OptionalSyncBlockBytes = optional_hex_bytes(SyncBlockPrefix)
OptionalZeroxBytes = optional_hex_bytes(ZeroxPrefix)
OptionalSyncTxBytes = optional_hex_bytes(SyncTxPrefix)

# Big integers travel as decimal strings
BigUintString = Annotated[int, PlainValidator(_validate_biguint), PlainSerializer(_serialize_biguint, return_type=str)]

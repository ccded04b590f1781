"""Prefixed hex encoding and decoding of byte sequences.

A byte blob is written as ``prefix + lowercase hex``. The prefix tags what
kind of blob it is (a block hash, a transaction hash, a plain ``0x`` value),
so a value encoded under one tag is rejected when decoded under another.

Usage::

    BytesToHex[SyncBlockPrefix].encode(b"\\xab\\xcd")   # "sync-bl:abcd"
    BytesToHex[ZeroxPrefix].decode("0x1a2b")          # b"\\x1a\\x2b"
    OptionBytesToHex[SyncTxPrefix].encode(None)       # None
"""

import binascii
from functools import lru_cache
from typing import Optional, Type, Union

from zkcodec.exceptions import FormatError

ByteSequence = Union[bytes, bytearray, memoryview]


class Prefix:
    """
    Base class for hex prefixes.

    Subclasses are never instantiated; they only carry the ``prefix``
    string and are used to parameterize the codecs below.
    """

    prefix: str

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        prefix = getattr(cls, "prefix", None)
        if not isinstance(prefix, str) or not prefix:
            raise TypeError(f"{cls.__name__} must define a non-empty 'prefix' string")


class SyncBlockPrefix(Prefix):
    """Prefix for block hashes: sync-bl:"""
    prefix = "sync-bl:"


class ZeroxPrefix(Prefix):
    """Prefix for plain hex values: 0x"""
    prefix = "0x"


class SyncTxPrefix(Prefix):
    """Prefix for transaction hashes: sync-tx:"""
    prefix = "sync-tx:"


@lru_cache(maxsize=None)
def _parameterize(codec: type, prefix_type: Type[Prefix]) -> type:
    name = f"{codec.__name__}[{prefix_type.__name__}]"
    return type(name, (codec,), {"prefix_type": prefix_type, "__module__": codec.__module__})


class _PrefixedCodec:
    """Shared parameterization for the prefixed codecs."""

    prefix_type: Optional[Type[Prefix]] = None

    def __class_getitem__(cls, prefix_type: Type[Prefix]) -> type:
        if cls.prefix_type is not None:
            raise TypeError(f"{cls.__name__} is already parameterized")
        if not (isinstance(prefix_type, type) and issubclass(prefix_type, Prefix)):
            raise TypeError(f"{cls.__name__} expects a Prefix subclass, got {prefix_type!r}")
        return _parameterize(cls, prefix_type)

    @classmethod
    def prefix(cls) -> str:
        """Return the prefix string of this codec."""
        if cls.prefix_type is None:
            raise TypeError(
                f"{cls.__name__} must be parameterized with a prefix, "
                f"e.g. {cls.__name__}[ZeroxPrefix]"
            )
        return cls.prefix_type.prefix


class BytesToHex(_PrefixedCodec):
    """
    Codec for byte fields serialized as hex strings with a prefix.

    Parameterize with a concrete prefix type, e.g. ``BytesToHex[SyncBlockPrefix]``.
    """

    @classmethod
    def encode(cls, value: ByteSequence) -> str:
        """
        Encode bytes to a prefixed hex string.

        Args:
            value: Bytes to encode

        Returns:
            str: ``prefix`` followed by lowercase hex (the prefix alone for empty input)
        """
        prefix = cls.prefix()
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected a byte sequence, got {type(value).__name__}")
        return prefix + bytes(value).hex()

    @classmethod
    def decode(cls, text: str) -> bytes:
        """
        Decode a prefixed hex string to bytes.

        Args:
            text: String starting with this codec's prefix

        Returns:
            bytes: Decoded payload

        Raises:
            FormatError: If the prefix is missing or the hex body is invalid
        """
        prefix = cls.prefix()
        if not isinstance(text, str):
            raise FormatError(f"Expected a hex string, got {type(text).__name__}")
        if not text.startswith(prefix):
            raise FormatError(f"string value missing prefix: {prefix}")

        try:
            return binascii.unhexlify(text[len(prefix):])
        except ValueError as e:
            # binascii.Error for bad digits or odd length, ValueError for non-ASCII text
            raise FormatError(str(e)) from e


class OptionBytesToHex(_PrefixedCodec):
    """
    Codec for optional byte fields; ``None`` stays ``None`` on both sides.

    Parameterize with a concrete prefix type, e.g. ``OptionBytesToHex[SyncTxPrefix]``.
    """

    @classmethod
    def encode(cls, value: Optional[ByteSequence]) -> Optional[str]:
        codec = cls._plain()
        if value is None:
            return None
        return codec.encode(value)

    @classmethod
    def decode(cls, text: Optional[str]) -> Optional[bytes]:
        codec = cls._plain()
        if text is None:
            return None
        return codec.decode(text)

    @classmethod
    def _plain(cls) -> type:
        cls.prefix()
        return BytesToHex[cls.prefix_type]


def bytes_to_hex(data: ByteSequence, prefix: Type[Prefix] = ZeroxPrefix) -> str:
    """
    Convert bytes to a prefixed hexadecimal string.

    Args:
        data: Bytes to convert
        prefix: Prefix type to tag the string with (default '0x')

    Returns:
        str: Hexadecimal string with the prefix
    """
    return BytesToHex[prefix].encode(data)


def hex_to_bytes(hex_str: str, prefix: Type[Prefix] = ZeroxPrefix) -> bytes:
    """
    Convert a prefixed hexadecimal string to bytes.

    Args:
        hex_str: Hexadecimal string carrying the prefix
        prefix: Prefix type the string must start with (default '0x')

    Returns:
        bytes: Decoded bytes

    Raises:
        FormatError: If the prefix is missing or the hex string is invalid
    """
    return BytesToHex[prefix].decode(hex_str)

"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "zkSync Storage Team"
__description__ = "Prefixed hex and exact-decimal codecs for zkSync storage"

from .exceptions import (
    CodecError,
    FormatError,
    MissingValueError,
    NonIntegralError,
    NegativeValueError,
    ValueOutOfRangeError,
)
from .utils.encoding import (
    Prefix,
    SyncBlockPrefix,
    ZeroxPrefix,
    SyncTxPrefix,
    BytesToHex,
    OptionBytesToHex,
)
from .storage.biguint import StoredBigUint, to_persisted, from_persisted

__all__ = [
    "CodecError",
    "FormatError",
    "MissingValueError",
    "NonIntegralError",
    "NegativeValueError",
    "ValueOutOfRangeError",
    "Prefix",
    "SyncBlockPrefix",
    "ZeroxPrefix",
    "SyncTxPrefix",
    "BytesToHex",
    "OptionBytesToHex",
    "StoredBigUint",
    "to_persisted",
    "from_persisted",
]

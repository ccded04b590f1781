"""Pydantic field types and wire models."""

from zkcodec.models.fields import (
    hex_bytes,
    optional_hex_bytes,
    SyncBlockBytes,
    ZeroxBytes,
    SyncTxBytes,
    OptionalSyncBlockBytes,
    OptionalZeroxBytes,
    OptionalSyncTxBytes,
    BigUintString,
)
from zkcodec.models.schemas import BlockRecord, TransactionRecord, BlockTransactions

__all__ = [
    "hex_bytes",
    "optional_hex_bytes",
    "SyncBlockBytes",
    "ZeroxBytes",
    "SyncTxBytes",
    "OptionalSyncBlockBytes",
    "OptionalZeroxBytes",
    "OptionalSyncTxBytes",
    "BigUintString",
    "BlockRecord",
    "TransactionRecord",
    "BlockTransactions",
]

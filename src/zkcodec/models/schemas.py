"""Pydantic wire models for records of the storage layer."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from zkcodec.models.fields import (
    BigUintString,
    OptionalSyncBlockBytes,
    SyncBlockBytes,
    SyncTxBytes,
    ZeroxBytes,
)


class BlockRecord(BaseModel):
    """Committed block as sent over the wire."""
    model_config = ConfigDict(from_attributes=True)

    block_number: int = Field(..., ge=0, description="Block height")
    block_hash: SyncBlockBytes = Field(..., description="Block hash (sync-bl: hex)")
    previous_hash: OptionalSyncBlockBytes = Field(default=None, description="Parent block hash, absent for genesis")
    fee_account: ZeroxBytes = Field(..., description="Fee account address (0x hex)")
    commitment: ZeroxBytes = Field(..., description="Block commitment (0x hex)")


class TransactionRecord(BaseModel):
    """Executed transaction as sent over the wire."""
    model_config = ConfigDict(from_attributes=True)

    tx_hash: SyncTxBytes = Field(..., description="Transaction hash (sync-tx: hex)")
    block_hash: OptionalSyncBlockBytes = Field(default=None, description="Containing block, absent while pending")
    amount: BigUintString = Field(..., description="Transferred amount (decimal string)")
    success: bool = True


class BlockTransactions(BaseModel):
    """Block together with its transactions."""
    block: BlockRecord
    transactions: List[TransactionRecord] = Field(default_factory=list)

"""Storage layer for persistent data."""

from zkcodec.storage.biguint import (
    StoredBigUint,
    biguint_to_decimal,
    decimal_to_int,
    int_to_biguint,
    to_persisted,
    from_persisted,
)
from zkcodec.storage.database import (
    DatabaseManager,
    AccountBalance,
    BigUintNumeric,
    Base,
    get_db_manager,
    reset_db_manager,
)

__all__ = [
    "StoredBigUint",
    "biguint_to_decimal",
    "decimal_to_int",
    "int_to_biguint",
    "to_persisted",
    "from_persisted",
    "DatabaseManager",
    "AccountBalance",
    "BigUintNumeric",
    "Base",
    "get_db_manager",
    "reset_db_manager",
]

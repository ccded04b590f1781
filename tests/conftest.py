"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def temp_db(tmp_path):
    """Fixture providing a temporary SQLite database manager."""
    from zkcodec.storage.database import DatabaseManager

    manager = DatabaseManager(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    manager.create_tables()
    yield manager
    manager.engine.dispose()


@pytest.fixture(scope="session")
def test_data():
    """Fixture providing test data."""
    return {
        "block_hash": bytes.fromhex("ab" * 32),
        "tx_hash": bytes.fromhex("cd" * 32),
        "address": bytes.fromhex("11" * 20),
        "big_value": 2**128,
    }

"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
import sys

from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from reaction_picker import config as picker_config
from reaction_picker.DB.frequency_db import FrequentlyUsedEmojisDB
from reaction_picker.Emoji.frequency_store import FrequencyStore


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="reaction_picker_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def temp_db_path(isolated_temp_dir):
    """Provide a path for a temporary database file."""
    return isolated_temp_dir / "test_frequency.db"


# ========== Database Fixtures ==========

@pytest.fixture
def memory_db():
    """An in-memory frequency database, closed after the test."""
    db = FrequentlyUsedEmojisDB(":memory:")
    yield db
    db.close()


@pytest.fixture
def frequency_store(memory_db):
    return FrequencyStore(memory_db)


@pytest.fixture
def custom_definitions():
    """Custom emoji definitions as the server configuration supplies them."""
    return {
        "partyparrot": {"name": "partyparrot", "extension": "gif"},
        "shipit": {"name": "shipit", "extension": "png"},
        "foo": {"name": "bar", "extension": "png"},
    }


# ========== Logging Fixtures ==========

@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


# ========== Test Environment Isolation ==========

@pytest.fixture(autouse=True)
def isolate_test_environment(monkeypatch, tmp_path):
    """Automatically isolate config and data paths from the real home directory."""
    test_data_dir = tmp_path / "test_data"
    test_data_dir.mkdir(exist_ok=True)

    monkeypatch.setenv("HOME", str(test_data_dir / "home"))
    monkeypatch.delenv(picker_config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(picker_config, "DEFAULT_CONFIG_PATH", test_data_dir / "config" / "config.toml")
    monkeypatch.setattr(picker_config, "BASE_DATA_DIR", test_data_dir / "share")
    monkeypatch.setattr(picker_config, "_CONFIG_CACHE", None)
    monkeypatch.setattr(picker_config, "_CONFIG_PATH", None)

    yield test_data_dir


# ========== Test Markers ==========

def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that don't require external resources")
    config.addinivalue_line("markers", "integration: Integration tests that may use files/network")

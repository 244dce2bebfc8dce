# test_reaction_picker_logging.py
# Description: Tests for loguru sink configuration
#
import sys

import pytest
from loguru import logger

from reaction_picker.config import DEFAULT_CONFIG_FROM_TOML, deep_merge_dicts, load_config
from reaction_picker.logging_config import configure_logging, configure_logging_from_config, truncate_query


@pytest.fixture
def restore_loguru():
    """Put loguru back to a single stderr handler after the test."""
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_file_sink_receives_messages(isolated_temp_dir, restore_loguru):
    log_file = isolated_temp_dir / "picker.log"

    configure_logging(level="DEBUG", log_file=log_file, console_output=False)
    logger.debug("frequency store opened")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "frequency store opened" in content
    assert "logging configured" in content


def test_level_filters_file_sink(isolated_temp_dir, restore_loguru):
    log_file = isolated_temp_dir / "picker.log"

    configure_logging(level="WARNING", log_file=log_file, console_output=False)
    logger.info("routine detail")
    logger.warning("custom emoji source failed")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "routine detail" not in content
    assert "custom emoji source failed" in content


def test_configure_from_config(isolated_temp_dir, restore_loguru):
    config_path = isolated_temp_dir / "config.toml"
    db_file = isolated_temp_dir / "data" / "counts.db"
    config_path.write_text(
        f'[database]\nfrequency_db_path = "{db_file.as_posix()}"\n'
        '[logging]\nlevel = "debug"\nlog_filename = "from_config.log"\n'
    )
    config = load_config(config_path=config_path)

    configure_logging_from_config(config)
    logger.debug("configured from file")
    logger.remove()

    log_file = db_file.resolve().parent / "from_config.log"
    assert "configured from file" in log_file.read_text(encoding="utf-8")


def test_configure_from_unloaded_config(isolated_temp_dir, restore_loguru):
    db_file = isolated_temp_dir / "explicit" / "counts.db"
    config = deep_merge_dicts(DEFAULT_CONFIG_FROM_TOML, {
        "database": {"frequency_db_path": str(db_file)},
        "logging": {"level": "DEBUG", "log_filename": "explicit.log"},
    })

    configure_logging_from_config(config)
    logger.debug("configured from explicit dict")
    logger.remove()

    log_file = db_file.resolve().parent / "explicit.log"
    assert "configured from explicit dict" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("query, expected", [
    ("smile", "smile"),
    ("x" * 50, "x" * 50),
    ("x" * 60, "x" * 50 + "..."),
])
def test_truncate_query(query, expected):
    assert truncate_query(query) == expected

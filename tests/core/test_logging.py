"""Tests for nikki.core.utils.logging."""

import os

import pytest
from loguru import logger

from nikki.core.config import Config
from nikki.core.utils.logging import setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def _restore_logger():
    yield
    logger.remove()


class TestSetupLogging:
    def test_file_sink_receives_messages(self, tmp_dir):
        log_file = os.path.join(tmp_dir, "nikki.log")
        setup_logging(level="INFO", log_file=log_file)

        logger.info("entry filter ran")
        logger.debug("too quiet to record")
        logger.remove()

        with open(log_file) as f:
            contents = f.read()
        assert "entry filter ran" in contents
        assert "too quiet to record" not in contents

    def test_level_is_case_insensitive(self, tmp_dir):
        log_file = os.path.join(tmp_dir, "nikki.log")
        setup_logging(level="debug", log_file=log_file)

        logger.debug("debug line")
        logger.remove()

        with open(log_file) as f:
            assert "debug line" in f.read()

    def test_console_only(self, capsys):
        setup_logging(level="WARNING")
        logger.warning("Negative frequency window")

        assert "Negative frequency window" in capsys.readouterr().err


class TestSetupLoggingFromConfig:
    def test_reads_logging_section(self, tmp_dir):
        log_file = os.path.join(tmp_dir, "from-config.log")
        config = Config(defaults={"logging": {"level": "INFO", "file": log_file}})

        setup_logging_from_config(config)
        logger.info("configured")
        logger.remove()

        with open(log_file) as f:
            assert "configured" in f.read()

import sys

import pytest
from loguru import logger

from chroma_client.logging import setup_logger


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_dev_mode_includes_location(capsys, restore_logger):
    setup_logger("DEV", "INFO")

    logger.info("dev message")

    err = capsys.readouterr().err
    assert "dev message" in err
    assert "test_logging" in err


def test_other_mode_is_compact(capsys, restore_logger):
    setup_logger("PROD", "INFO")

    logger.info("prod message")

    err = capsys.readouterr().err
    assert "prod message" in err
    assert "test_logging" not in err


def test_level_filters_messages(capsys, restore_logger):
    setup_logger("PROD", "warning")

    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


def test_returns_handler_id(restore_logger):
    handler_id = setup_logger("PROD")

    assert isinstance(handler_id, int)
    logger.remove(handler_id)

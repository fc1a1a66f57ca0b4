"""Tests for common.cli_helpers module."""

import argparse
import logging
from unittest.mock import patch

import pytest

from common.cli_helpers import LOG_FORMAT, parse_log_level, setup_logging


class TestParseLogLevel:
    def test_known_levels(self) -> None:
        assert parse_log_level("info") == logging.INFO
        assert parse_log_level(" DEBUG ") == logging.DEBUG

    def test_unknown_level(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_log_level("verbose")


class TestSetupLogging:
    @patch("common.cli_helpers.logging.basicConfig")
    def test_accepts_level_name(self, mock_basic_config) -> None:
        setup_logging("warning")
        mock_basic_config.assert_called_once_with(level=logging.WARNING, format=LOG_FORMAT)

    @patch("common.cli_helpers.logging.basicConfig")
    def test_accepts_numeric_level(self, mock_basic_config) -> None:
        setup_logging(logging.ERROR)
        mock_basic_config.assert_called_once_with(level=logging.ERROR, format=LOG_FORMAT)

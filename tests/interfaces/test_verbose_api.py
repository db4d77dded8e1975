"""
Unit tests for diagnostics verbosity in the Saw API.
"""

import logging
from unittest.mock import patch

from saw import Saw, SawConfig, initialize


class TestVerboseLogging:
    """Test cases for the package diagnostics logger."""

    def test_default_initialization(self):
        assert Saw().verbose is False

    def test_verbose_initialization(self):
        assert Saw(verbose=True).verbose is True

    @patch('saw.interfaces.api.logger')
    def test_logger_level_verbose_true(self, mock_logger):
        Saw(verbose=True)
        mock_logger.setLevel.assert_called_with(logging.DEBUG)

    @patch('saw.interfaces.api.logger')
    def test_logger_level_verbose_false(self, mock_logger):
        Saw(verbose=False)
        mock_logger.setLevel.assert_called_with(logging.INFO)

    @patch('saw.interfaces.api.logger')
    def test_default_construction_leaves_level_alone(self, mock_logger):
        Saw()
        mock_logger.setLevel.assert_not_called()

    def test_application_level_survives_initialize(self):
        package_logger = logging.getLogger("saw")
        previous = package_logger.level
        package_logger.setLevel(logging.WARNING)
        try:
            initialize()
            assert package_logger.level == logging.WARNING
        finally:
            package_logger.setLevel(previous)

    @patch('saw.interfaces.api.logger')
    def test_set_verbose_toggle(self, mock_logger):
        log = Saw()
        log.set_verbose(True)

        assert log.verbose is True
        mock_logger.setLevel.assert_called_once_with(logging.DEBUG)

    @patch('saw.interfaces.api.logger')
    def test_set_config_is_logged(self, mock_logger):
        Saw().set_config(SawConfig(colors=True))
        mock_logger.debug.assert_called_with("Configuration replaced: colors=True")

    def test_diagnostics_stay_off_stdout(self, capsys):
        log = Saw(verbose=True)
        log.set_config(SawConfig())
        log.json.info(object())

        assert capsys.readouterr().out == ""

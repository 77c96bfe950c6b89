"""Tests for logging setup."""

from __future__ import annotations

from unittest.mock import patch


class TestSetupLogging:
    def test_removes_default_handler_and_adds_stderr(self):
        """setup_logging configures loguru with the correct level."""
        from wallet_events.log import setup_logging

        with patch("wallet_events.log.logger") as mock_logger:
            setup_logging(verbose=False)
            mock_logger.remove.assert_called_once()
            mock_logger.add.assert_called_once()
            assert mock_logger.add.call_args[1]["level"] == "INFO"

    def test_verbose_sets_debug_level(self):
        from wallet_events.log import setup_logging

        with patch("wallet_events.log.logger") as mock_logger:
            setup_logging(verbose=True)
            assert mock_logger.add.call_args[1]["level"] == "DEBUG"

    def test_format_includes_time_and_level(self):
        from wallet_events.log import setup_logging

        with patch("wallet_events.log.logger") as mock_logger:
            setup_logging()
            fmt = mock_logger.add.call_args[1]["format"]
            assert "{time:" in fmt
            assert "{level:" in fmt
            assert "{message}" in fmt


class TestConfigure:
    def test_setup_logging_defaults_to_config_verbose(self):
        from wallet_events.config import Config
        from wallet_events.log import setup_logging

        with patch("wallet_events.log.cfg", Config({"verbose": True})), patch(
            "wallet_events.log.logger"
        ) as mock_logger:
            setup_logging()
            assert mock_logger.add.call_args[1]["level"] == "DEBUG"

    def test_configure_loads_config_and_sets_level(self, tmp_path, monkeypatch):
        # Arrange
        from wallet_events import config as config_module
        from wallet_events.config import ENV_VERBOSE, Config
        from wallet_events.log import configure

        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv(ENV_VERBOSE, raising=False)
        monkeypatch.setattr(config_module, "cfg", Config({}))
        path = tmp_path / "config.yaml"
        path.write_text("verbose: true\n")

        # Act
        with patch("wallet_events.log.logger") as mock_logger:
            result = configure(path)

        # Assert
        assert result is config_module.cfg
        assert result.verbose is True
        assert mock_logger.add.call_args[1]["level"] == "DEBUG"


class TestLibraryLogging:
    def test_clearing_all_listeners_logs_debug(self):
        from wallet_events.events import EventEmitter

        emitter = EventEmitter()
        with patch("wallet_events.events.logger") as mock_logger:
            emitter.remove_all_listeners()
            mock_logger.debug.assert_called_once()

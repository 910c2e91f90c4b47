"""
Unit tests for logging utilities.

Tests the logging configuration and utilities including
logger setup, formatting, and the emit-specific logger.
"""

import pytest
import logging
import json
import tempfile
import os
from unittest.mock import Mock, patch
from tsemit.utils.config import load_config, set_config
from tsemit.utils.logging import setup_logging, setup_logging_from_config, get_logger, EmitLogger


class TestLoggingSetup:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self):
        """Test default logging setup."""
        setup_logging()

        logger = logging.getLogger('tsemit')
        assert logger.level == logging.WARNING
        assert len(logger.handlers) > 0
        assert logger.propagate is False

    def test_setup_logging_debug_level(self):
        """Test logging setup with debug level."""
        setup_logging(level='DEBUG')

        logger = logging.getLogger('tsemit')
        assert logger.level == logging.DEBUG

    def test_setup_logging_invalid_level(self):
        """Test logging setup with invalid level defaults to WARNING."""
        setup_logging(level='INVALID')

        logger = logging.getLogger('tsemit')
        assert logger.level == logging.WARNING

    def test_setup_logging_with_file(self):
        """Test logging setup with file output."""
        with tempfile.NamedTemporaryFile(suffix='.log', delete=False) as f:
            log_file = f.name

        try:
            setup_logging(level='INFO', log_file=log_file)

            logger = logging.getLogger('tsemit')

            # Should have both console and file handlers
            handler_types = [type(h).__name__ for h in logger.handlers]
            assert 'StreamHandler' in handler_types
            assert 'FileHandler' in handler_types

            logger.info("Test message")
            for handler in logger.handlers:
                handler.flush()

            with open(log_file, 'r') as f:
                assert "Test message" in f.read()

        finally:
            setup_logging()
            if os.path.exists(log_file):
                os.unlink(log_file)

    def test_setup_logging_environment_variable(self):
        """Test logging setup with environment variable."""
        with patch.dict('os.environ', {'TSEMIT_LOG_LEVEL': 'DEBUG'}):
            setup_logging()

            logger = logging.getLogger('tsemit')
            assert logger.level == logging.DEBUG

    def test_setup_logging_removes_existing_handlers(self):
        """Test that setup_logging removes existing handlers."""
        logger = logging.getLogger('tsemit')

        dummy_handler = logging.StreamHandler()
        logger.addHandler(dummy_handler)

        setup_logging()

        assert dummy_handler not in logger.handlers
        assert len(logger.handlers) > 0

    def test_get_logger(self):
        """Test getting logger instances."""
        logger1 = get_logger('test_module')
        logger2 = get_logger('test_module')

        assert logger1 is logger2
        assert logger1.name == 'tsemit.test_module'

    def test_get_logger_package_module(self):
        """Test module names inside the package are not prefixed twice."""
        assert get_logger('tsemit.emit.emitter').name == 'tsemit.emit.emitter'
        assert get_logger('tsemit').name == 'tsemit'


class TestLoggingFromConfig:
    """Test applying the logging section of the configuration."""

    def _config(self, tmp_path, logging_section):
        config_file = tmp_path / 'tsemit_config.json'
        config_file.write_text(json.dumps({'logging': logging_section}))
        return load_config(str(config_file))

    def test_level_and_file_from_config(self, tmp_path):
        """Test the configured level and log file are applied."""
        log_file = tmp_path / 'emit.log'
        config = self._config(tmp_path, {
            'level': 'DEBUG',
            'enable_file_logging': True,
            'log_file': str(log_file),
        })

        setup_logging_from_config(config)

        logger = logging.getLogger('tsemit')
        assert logger.level == logging.DEBUG
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert [h.baseFilename for h in file_handlers] == [str(log_file)]

    def test_file_logging_disabled(self, tmp_path):
        """Test no file handler is added unless file logging is enabled."""
        config = self._config(tmp_path, {'level': 'INFO', 'log_file': str(tmp_path / 'unused.log')})

        setup_logging_from_config(config)

        logger = logging.getLogger('tsemit')
        assert logger.level == logging.INFO
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        assert not (tmp_path / 'unused.log').exists()

    def test_environment_level_takes_precedence(self, tmp_path, monkeypatch):
        """Test TSEMIT_LOG_LEVEL overrides the configured level."""
        monkeypatch.setenv('TSEMIT_LOG_LEVEL', 'ERROR')
        config = self._config(tmp_path, {'level': 'DEBUG'})

        setup_logging_from_config(config)

        assert logging.getLogger('tsemit').level == logging.ERROR

    def test_global_config_used_by_default(self, tmp_path):
        """Test the global configuration is read when none is passed."""
        set_config(self._config(tmp_path, {'level': 'INFO'}))

        setup_logging_from_config()

        assert logging.getLogger('tsemit').level == logging.INFO


class TestEmitLogger:
    """Test EmitLogger class functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.emit_logger = EmitLogger('test_component')

    def test_emit_logger_creation(self):
        """Test EmitLogger creation."""
        assert self.emit_logger.logger.name == 'tsemit.test_component'
        assert isinstance(self.emit_logger.logger, logging.Logger)

    @patch('tsemit.utils.logging.get_logger')
    def test_log_emit_start(self, mock_get_logger):
        """Test logging the start of an emit."""
        mock_logger = Mock()
        mock_get_logger.return_value = mock_logger

        logger = EmitLogger('test')
        logger.log_emit_start('Person', 'class')

        mock_logger.debug.assert_called_once()
        call_args = mock_logger.debug.call_args[0][0]
        assert "Emitting class 'Person'" in call_args

    @patch('tsemit.utils.logging.get_logger')
    def test_log_emit_failure(self, mock_get_logger):
        """Test logging a failed emit."""
        mock_logger = Mock()
        mock_get_logger.return_value = mock_logger

        logger = EmitLogger('test')
        logger.log_emit_failure('Person', 'Type name is required.')

        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args[0][0]
        assert 'Person' in call_args
        assert 'Type name is required.' in call_args

    @patch('tsemit.utils.logging.get_logger')
    def test_log_validation_result(self, mock_get_logger):
        """Test logging a validation run."""
        mock_logger = Mock()
        mock_get_logger.return_value = mock_logger

        logger = EmitLogger('test')
        logger.log_validation_result(3, 1, 1.25)

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert '1.250s' in call_args
        assert '3 diagnostics' in call_args
        assert '1 errors' in call_args

    @patch('tsemit.utils.logging.get_logger')
    def test_log_tool_resolution(self, mock_get_logger):
        """Test logging tool resolution."""
        mock_logger = Mock()
        mock_get_logger.return_value = mock_logger

        logger = EmitLogger('test')
        logger.log_tool_resolution('tsc', 'npx tsc')

        call_args = mock_logger.debug.call_args[0][0]
        assert "Resolved tsc to 'npx tsc'" in call_args

    @patch('tsemit.utils.logging.get_logger')
    def test_log_formatter_fallback(self, mock_get_logger):
        """Test logging a skipped formatter."""
        mock_logger = Mock()
        mock_get_logger.return_value = mock_logger

        logger = EmitLogger('test')
        logger.log_formatter_fallback('dprint', 'no output')

        call_args = mock_logger.debug.call_args[0][0]
        assert 'dprint' in call_args
        assert 'no output' in call_args


class TestLoggingIntegration:
    """Integration tests for logging functionality."""

    def test_emit_logs_start(self):
        """Test the emitter reports through the package logger."""
        from tsemit import TypeBuilder

        with patch('tsemit.emit.emitter.emit_logger') as mock_emit_logger:
            TypeBuilder.class_('Person').emit()

        mock_emit_logger.log_emit_start.assert_called_once_with('Person', 'class')
        mock_emit_logger.log_emit_failure.assert_not_called()

    def test_emit_logs_failure(self):
        """Test a failed emit is logged."""
        from tsemit import TypeBuilder

        with patch('tsemit.emit.emitter.emit_logger') as mock_emit_logger:
            TypeBuilder.class_('').emit()

        mock_emit_logger.log_emit_failure.assert_called_once_with('', 'Type name is required.')


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch):
    """Run each test without TSEMIT_LOG_LEVEL and restore the default setup afterwards."""
    monkeypatch.delenv('TSEMIT_LOG_LEVEL', raising=False)
    yield
    monkeypatch.delenv('TSEMIT_LOG_LEVEL', raising=False)
    setup_logging()

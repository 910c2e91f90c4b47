"""
Unit tests for information utilities.

Tests the system and toolchain information gathering and the
tsemit-info entry point.
"""

import pytest
import sys
from unittest.mock import Mock, patch
from tsemit.utils.info import get_system_info, get_toolchain_info, print_info, main


class TestSystemInfo:
    """Test system information gathering."""

    def test_get_system_info_basic(self):
        """Test basic system information gathering."""
        info = get_system_info()

        assert 'python_version' in info
        assert 'platform' in info
        assert 'architecture' in info
        assert info['python_version'] == sys.version
        assert isinstance(info['architecture'], tuple)


class TestToolchainInfo:
    """Test external tool information gathering."""

    @patch('tsemit.compiler.PrettierFormatter')
    @patch('tsemit.compiler.DprintFormatter')
    @patch('tsemit.compiler.get_tsc_environment')
    def test_get_toolchain_info(self, mock_get_env, mock_dprint, mock_prettier):
        """Test toolchain information with mocked tools."""
        environment = Mock()
        environment.resolve.return_value = ['npx', 'tsc']
        environment.get_version.return_value = 'Version 5.4.5'
        mock_get_env.return_value = environment
        mock_dprint.return_value.is_available.return_value = False
        mock_prettier.return_value.is_available.return_value = True

        info = get_toolchain_info()

        assert info['tsc_command'] == 'npx tsc'
        assert info['tsc_version'] == 'Version 5.4.5'
        assert info['dprint_available'] is False
        assert info['prettier_available'] is True
        assert info['validation_level'] == 'none'
        mock_get_env.assert_called_once_with(None)


class TestPrintInfo:
    """Test information printing functionality."""

    @patch('tsemit.utils.info.get_toolchain_info')
    @patch('tsemit.utils.info.get_system_info')
    @patch('builtins.print')
    def test_print_info_basic(self, mock_print, mock_system_info, mock_toolchain_info):
        """Test basic information printing."""
        mock_toolchain_info.return_value = {
            'tsc_command': 'tsc',
            'tsc_version': 'Version 5.4.5',
            'dprint_available': True,
            'prettier_available': False,
            'config_file': '/etc/tsemit.json',
            'validation_level': 'syntax',
        }
        mock_system_info.return_value = {
            'python_version': '3.11.4 (main, ...)',
            'platform': 'Linux-6.1.0',
            'architecture': ('64bit', 'ELF'),
        }

        print_info()

        assert mock_print.call_count > 5
        printed_text = ' '.join([str(call[0][0]) for call in mock_print.call_args_list])
        assert 'tsemit Version: 0.1.0' in printed_text
        assert 'tsc Version: Version 5.4.5' in printed_text
        assert 'dprint Available: True' in printed_text
        assert 'Validation Level: syntax' in printed_text
        assert 'Python Version: 3.11.4' in printed_text

    @patch('tsemit.utils.info.get_toolchain_info')
    @patch('tsemit.utils.info.get_system_info')
    @patch('builtins.print')
    def test_print_info_without_tsc(self, mock_print, mock_system_info, mock_toolchain_info):
        """Test printing when the compiler is missing."""
        mock_toolchain_info.return_value = {
            'tsc_command': 'tsc',
            'tsc_version': None,
            'dprint_available': False,
            'prettier_available': False,
            'config_file': 'tsemit_config.json',
            'validation_level': 'none',
        }
        mock_system_info.return_value = {
            'python_version': '3.11.4',
            'platform': 'Linux',
            'architecture': ('64bit', 'ELF'),
        }

        print_info()

        printed_text = ' '.join([str(call[0][0]) for call in mock_print.call_args_list])
        assert 'tsc: Not available' in printed_text


class TestMainFunction:
    """Test main entry point functionality."""

    @patch('tsemit.utils.info.setup_logging_from_config')
    @patch('tsemit.utils.info.print_info')
    def test_main_success(self, mock_print_info, mock_setup_logging):
        """Test successful main execution applies configured logging first."""
        main()
        mock_setup_logging.assert_called_once_with()
        mock_print_info.assert_called_once()

    @patch('tsemit.utils.info.print_info', side_effect=Exception("Test error"))
    @patch('builtins.print')
    @patch('sys.exit')
    def test_main_error(self, mock_exit, mock_print, mock_print_info):
        """Test main execution with error."""
        main()

        mock_print_info.assert_called_once()
        mock_print.assert_called_once_with("Error getting system information: Test error")
        mock_exit.assert_called_once_with(1)

"""
Tests for byte_amount.logging module.
"""
from byte_amount.logging import LOG_DIR, setup_logging
from byte_amount.models import Amount


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_log_dir(self):
        """Test the default directory."""
        assert LOG_DIR.name == 'logs'

    def test_creates_directory(self, tmp_path, restore_logger):
        """Test that a missing log directory is created."""
        log_dir = tmp_path / 'nested' / 'logs'
        setup_logging(log_dir)
        assert log_dir.is_dir()

    def test_returns_logger(self, tmp_path, restore_logger):
        """Test that the loguru logger is returned."""
        assert setup_logging(tmp_path) is restore_logger

    def test_writes_records(self, tmp_path, restore_logger):
        """Test that package records reach the log file."""
        setup_logging(tmp_path)
        Amount.auto_detect(32768)

        content = (tmp_path / 'byte_amount.log').read_text(encoding='utf-8')
        assert 'DEBUG' in content
        assert 'Selected Kb for 32768.0 bytes' in content
        assert 'byte_amount.models:auto_detect' in content

    def test_level_filter(self, tmp_path, restore_logger):
        """Test that records below the chosen level are dropped."""
        setup_logging(tmp_path, level='WARNING')
        Amount.auto_detect(32768)

        log_path = tmp_path / 'byte_amount.log'
        content = log_path.read_text(encoding='utf-8') if log_path.exists() else ''
        assert 'Selected' not in content

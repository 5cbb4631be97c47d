"""
Unit tests for shared utilities: logging setup and version info.
"""
import sys

import pytest
from loguru import logger

import tvscanner
from tvscanner.config.settings import settings
from tvscanner.shared.logging_config import context_logger, setup_logging
from tvscanner.version import VERSION


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    """Unit tests for loguru sink configuration."""

    @pytest.mark.unit
    def test_file_sinks_receive_bound_records(self, tmp_path, restore_logger):
        setup_logging(service_name="scan-test", log_level="WARNING", log_dir=str(tmp_path))

        context_logger.debug("debug line")
        context_logger.error("error line")
        logger.complete()

        all_logs = [p for p in tmp_path.glob("scan-test_*.log") if "errors" not in p.name]
        error_logs = list(tmp_path.glob("scan-test_errors_*.log"))
        assert len(all_logs) == 1
        assert len(error_logs) == 1

        all_text = all_logs[0].read_text()
        error_text = error_logs[0].read_text()
        assert "debug line" in all_text
        assert "error line" in all_text
        assert "tvscanner" in all_text
        assert "debug line" not in error_text
        assert "error line" in error_text

    @pytest.mark.unit
    def test_console_only_without_log_dir(self, tmp_path, restore_logger):
        setup_logging(log_level="INFO")

        context_logger.info("console only")

        assert list(tmp_path.iterdir()) == []

    @pytest.mark.unit
    def test_console_level_defaults_to_settings(self, capsys, monkeypatch, restore_logger):
        monkeypatch.setattr(settings, "log_level", "ERROR")
        setup_logging()

        context_logger.warning("below configured level")
        context_logger.error("at configured level")

        err = capsys.readouterr().err
        assert "below configured level" not in err
        assert "at configured level" in err


class TestVersion:
    """Unit tests for the package version."""

    @pytest.mark.unit
    def test_package_version(self):
        assert tvscanner.__version__ == VERSION
        assert VERSION.count(".") == 2

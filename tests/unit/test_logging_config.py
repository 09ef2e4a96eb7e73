"""Unit tests for dinersim logging configuration."""

from __future__ import annotations

import json
import logging
from unittest import mock

import dinersim
from dinersim.logging_config import (
    LOGGER_NAME,
    JsonFormatter,
    _get_level,
    _get_logger,
)


class TestSilentByDefault:
    def test_import_produces_no_log_output(self, capfd):
        import importlib

        importlib.reload(dinersim)

        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_logger_has_null_handler(self):
        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_simulation_is_silent_without_configuration(self, capfd):
        dinersim.Simulation.from_config(dinersim.SimulationConfig(duration=30)).run()
        captured = capfd.readouterr()
        assert captured.err == ""


class TestEnableConsoleLogging:
    def test_sets_level(self):
        dinersim.enable_console_logging(level="DEBUG")
        assert _get_logger().level == logging.DEBUG

    def test_tick_status_lines_reach_stderr(self, capfd):
        dinersim.enable_console_logging(level="INFO", format="%(message)s")
        dinersim.Simulation.from_config(dinersim.SimulationConfig(duration=10)).run()

        err = capfd.readouterr().err
        assert "Time: 5 | Occupied tables:" in err
        assert "Time: 10 | Occupied tables:" in err
        assert "Simulation complete" in err


class TestEnableFileLogging:
    def test_creates_file_and_parent_dirs(self, tmp_path):
        path = tmp_path / "logs" / "nested" / "sim.log"
        handler = dinersim.enable_file_logging(path, level="INFO")
        logging.getLogger(f"{LOGGER_NAME}.test").info("to file")
        handler.flush()

        assert path.exists()
        assert "to file" in path.read_text()

    def test_respects_rotation_settings(self, tmp_path):
        handler = dinersim.enable_file_logging(tmp_path / "r.log", max_bytes=1024, backup_count=2)
        assert handler.maxBytes == 1024
        assert handler.backupCount == 2


class TestJsonLogging:
    def test_formatter_outputs_json(self):
        record = logging.LogRecord(
            name="dinersim.core.restaurant", level=logging.INFO, pathname="", lineno=0,
            msg="seated %s", args=("party",), exc_info=None,
        )
        data = json.loads(JsonFormatter().format(record))
        assert data["level"] == "INFO"
        assert data["logger"] == "dinersim.core.restaurant"
        assert data["message"] == "seated party"
        assert "timestamp" in data

    def test_enable_json_logging(self, capfd):
        dinersim.enable_json_logging(level="INFO")
        logging.getLogger(f"{LOGGER_NAME}.test").info("structured")
        err = capfd.readouterr().err.strip()
        assert json.loads(err)["message"] == "structured"


class TestConfigureFromEnv:
    def test_no_env_does_nothing(self):
        with mock.patch.dict("os.environ", {}, clear=True):
            before = list(_get_logger().handlers)
            dinersim.configure_from_env()
            assert _get_logger().handlers == before

    def test_level_enables_console(self):
        with mock.patch.dict("os.environ", {"DS_LOGGING": "WARNING"}, clear=True):
            dinersim.configure_from_env()
        assert _get_logger().level == logging.WARNING
        assert any(
            type(h) is logging.StreamHandler for h in _get_logger().handlers
        )

    def test_log_file_with_json(self, tmp_path):
        path = tmp_path / "env.log"
        env = {"DS_LOG_FILE": str(path), "DS_LOG_JSON": "1"}
        with mock.patch.dict("os.environ", env, clear=True):
            dinersim.configure_from_env()
        logging.getLogger(f"{LOGGER_NAME}.test").info("json to file")
        for h in _get_logger().handlers:
            h.flush()
        assert json.loads(path.read_text().strip())["message"] == "json to file"


class TestLevels:
    def test_get_level(self):
        assert _get_level("debug") == logging.DEBUG
        assert _get_level(logging.ERROR) == logging.ERROR
        assert _get_level("nonsense") == logging.INFO

    def test_set_module_level(self):
        dinersim.set_module_level("core.restaurant", "DEBUG")
        assert logging.getLogger(f"{LOGGER_NAME}.core.restaurant").level == logging.DEBUG
        logging.getLogger(f"{LOGGER_NAME}.core.restaurant").setLevel(logging.NOTSET)

    def test_disable_logging(self, capfd):
        dinersim.enable_console_logging()
        dinersim.disable_logging()
        logging.getLogger(f"{LOGGER_NAME}.test").critical("hidden")
        assert "hidden" not in capfd.readouterr().err

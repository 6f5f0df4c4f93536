import logging
import os

from utils import external_path, setup_logging


def test_external_path_is_relative_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert external_path("wheel.log") == os.path.join(str(tmp_path), "wheel.log")


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging(logging.DEBUG, log_file="wheel.log")
        logging.getLogger("choices").debug("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in (tmp_path / "wheel.log").read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

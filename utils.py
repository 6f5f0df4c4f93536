import logging
import os
import sys

from constants import LOG_FILE


def external_path(relative_path):
    """Absolute path of a file kept next to the executable (or the working directory)."""
    if getattr(sys, 'frozen', False):
        base_path = os.path.dirname(sys.executable)
    else:
        base_path = os.path.abspath(".")
    return os.path.join(base_path, relative_path)


def setup_logging(level=logging.INFO, log_file=LOG_FILE):
    """Log to the console and to a file beside the executable."""
    root = logging.getLogger()
    if root.handlers:
        return
    formatter = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s", "%H:%M:%S")

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_file:
        try:
            file_handler = logging.FileHandler(external_path(log_file), encoding="utf-8")
        except OSError as exc:
            root.warning("Cannot open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    root.setLevel(level)

import sys
import logging
from PySide6.QtWidgets import QApplication

from main_window import MainWindow
from session import WheelSession
from utils import setup_logging


def main():
    setup_logging(logging.INFO)
    app = QApplication(sys.argv)
    session = WheelSession()
    window = MainWindow(session)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

"""Application entry point and setup for the Wordtap typing trainer."""

import logging
import signal
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from wordtap.core.config import ConfigStore
from wordtap.core.session import TypingSession
from wordtap.core.words import WordSource
from wordtap.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def install_interrupt_handler(app: QApplication) -> QTimer:
    """Quit the event loop cleanly on Ctrl+C.

    Python only runs signal handlers between bytecodes, so a no-op timer keeps
    control returning to the interpreter while Qt's loop is idle.
    """
    signal.signal(signal.SIGINT, lambda *_: app.quit())
    wakeup = QTimer()
    wakeup.timeout.connect(lambda: None)
    wakeup.start(200)
    return wakeup


def run() -> None:
    """Load the configuration, build the session and start the main window."""
    configure_logging()
    config = ConfigStore().load()
    if config.limit == 0:
        logging.info("Words limit is 0, nothing to type")
        sys.exit(0)

    app = QApplication(sys.argv)
    app.setApplicationName("Wordtap")
    app.setApplicationDisplayName("Wordtap")
    wakeup = install_interrupt_handler(app)

    session = TypingSession(config, WordSource())
    logging.info("Starting session: %s, %d words", config.language.code, config.limit)

    window = MainWindow(session)
    window.show()

    status = app.exec()
    wakeup.stop()
    sys.exit(status)

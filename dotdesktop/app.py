import argparse
import logging
import sys

from . import __version__, config

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="dotdesktop", description=config.APP_TITLE)
    parser.add_argument("path", nargs="?", help=".desktop file to open")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--version", action="version", version="%(prog)s " + __version__)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config.configure_logging(args.debug)

    # Qt is only needed once we actually open a window
    from PySide6.QtWidgets import QApplication

    from .window import DesktopEntryEditor

    app = QApplication(sys.argv[:1])
    window = DesktopEntryEditor(open_path=args.path)
    window.show()
    logger.debug("Window shown")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

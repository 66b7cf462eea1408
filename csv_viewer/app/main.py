"""
Main entry point for the CSV Viewer application.
"""
import argparse
import sys
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from .. import __version__
from ..config import load_config
from ..logging_config import setup_logging
from .main_window import MainWindow


def build_dark_palette() -> QPalette:
    """Create the dark Fusion palette used by the application."""
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(53, 53, 53))
    palette.setColor(QPalette.ColorRole.WindowText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Base, QColor(25, 25, 25))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(45, 45, 45))
    palette.setColor(QPalette.ColorRole.ToolTipBase, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.ToolTipText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.Text, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.PlaceholderText, QColor(140, 140, 140))
    palette.setColor(QPalette.ColorRole.Button, QColor(53, 53, 53))
    palette.setColor(QPalette.ColorRole.ButtonText, Qt.GlobalColor.white)
    palette.setColor(QPalette.ColorRole.BrightText, Qt.GlobalColor.red)
    palette.setColor(QPalette.ColorRole.Link, QColor(42, 130, 218))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.ColorRole.HighlightedText, Qt.GlobalColor.black)
    return palette


def parse_args(argv=None):
    """Split command line arguments into viewer options and Qt arguments."""
    parser = argparse.ArgumentParser(description="CSV Viewer")
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="JSON file with viewer settings"
    )
    return parser.parse_known_args(argv)


def main():
    """Run the CSV Viewer application."""
    args, qt_args = parse_args(sys.argv[1:])
    setup_logging()

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName("CSV Viewer")
    app.setOrganizationName("CSVViewer")
    app.setApplicationVersion(__version__)

    app.setStyle("Fusion")
    app.setPalette(build_dark_palette())

    window = MainWindow(load_config(args.config))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

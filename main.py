#!/usr/bin/env python3
"""
Simple File Manager - Main Entry Point
"""
import argparse
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from PyQt6.QtWidgets import QApplication
from ui.main_window import MainWindow
from utils.crash_logger import CrashLogger, configure_logging


def parse_args(argv):
    parser = argparse.ArgumentParser(prog="simple-file-manager", description="Browse and manage files.")
    parser.add_argument("start_dir", nargs="?", default=None,
                        help="directory to open first (defaults to your home directory)")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    # Qt consumes its own arguments; leave anything unknown to it
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main():
    args = parse_args(sys.argv[1:])
    configure_logging(args.debug)

    # Install crash logger to catch unhandled exceptions
    CrashLogger.install_exception_handler()

    app = QApplication(sys.argv)
    app.setApplicationName("Simple File Manager")
    app.setApplicationVersion("1.0")
    app.setOrganizationName("Simple File Manager")

    window = MainWindow(initial_path=args.start_dir)
    window.show()

    sys.exit(app.exec())

if __name__ == "__main__":
    main()

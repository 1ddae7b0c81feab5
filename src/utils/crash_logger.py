"""
Crash logging and logging setup for Simple File Manager

Fatal, unhandled exceptions are appended with a timestamp and stack trace to
a log file that survives the process; everything else goes through the
standard logging module to stderr.
"""
import logging
import sys
import traceback
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(debug=False):
    """Route log records to stderr; DEBUG level when debug is set"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


class CrashLogger:
    """Logger for fatal crashes and exceptions"""

    LOG_DIR = Path.home() / ".local" / "share" / "simple-file-manager"
    LOG_FILE = LOG_DIR / "crash.log"
    MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB

    @classmethod
    def setup(cls):
        """Create the log directory, falling back to the working directory"""
        try:
            cls.LOG_DIR.mkdir(parents=True, exist_ok=True)
        except OSError:
            cls.LOG_DIR = Path.cwd()
            cls.LOG_FILE = cls.LOG_DIR / "crash.log"

    @classmethod
    def format_entry(cls, exc_type, exc_value, exc_traceback):
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        separator = "=" * 80
        lines = [
            "",
            separator,
            f"FATAL ERROR - {timestamp}",
            separator,
            f"Exception Type: {exc_type.__name__}",
            f"Exception Message: {exc_value}",
            "",
            "Stack Trace:",
            "".join(traceback.format_exception(exc_type, exc_value, exc_traceback)).rstrip("\n"),
            separator,
            "",
        ]
        return "\n".join(lines)

    @classmethod
    def log_exception(cls, exc_type, exc_value, exc_traceback):
        """
        Log an exception with full stack trace and timestamp.

        Installed as sys.excepthook, so it must never raise itself.
        """
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        try:
            cls.setup()
            cls._rotate_log_if_needed()
            with open(cls.LOG_FILE, 'a', encoding='utf-8') as f:
                f.write(cls.format_entry(exc_type, exc_value, exc_traceback))
            logger.critical("Unhandled %s logged to %s", exc_type.__name__, cls.LOG_FILE,
                            exc_info=(exc_type, exc_value, exc_traceback))
        except OSError as e:
            print(f"Failed to write crash log: {e}", file=sys.stderr)
            traceback.print_exception(exc_type, exc_value, exc_traceback)

    @classmethod
    def _rotate_log_if_needed(cls):
        """Move an oversized log aside to crash.log.old"""
        try:
            if cls.LOG_FILE.exists() and cls.LOG_FILE.stat().st_size > cls.MAX_LOG_SIZE:
                backup_file = cls.LOG_FILE.with_suffix('.log.old')
                if backup_file.exists():
                    backup_file.unlink()
                cls.LOG_FILE.rename(backup_file)
        except OSError as e:
            # Keep appending to the big file rather than lose the crash
            logger.warning("Crash log rotation failed: %s", e)

    @classmethod
    def install_exception_handler(cls):
        """Install the crash logger as the global exception handler"""
        sys.excepthook = cls.log_exception

    @classmethod
    def get_log_path(cls) -> str:
        cls.setup()
        return str(cls.LOG_FILE)

    @classmethod
    def crash_count(cls) -> int:
        if not cls.LOG_FILE.exists():
            return 0
        with open(cls.LOG_FILE, 'r', encoding='utf-8') as f:
            return f.read().count("FATAL ERROR -")

    @classmethod
    def clear_log(cls):
        """Clear the crash log file"""
        try:
            if cls.LOG_FILE.exists():
                cls.LOG_FILE.unlink()
        except OSError as e:
            logger.error("Failed to clear crash log: %s", e)

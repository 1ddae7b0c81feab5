#!/usr/bin/env python3
"""
Utility script to view and manage Simple File Manager crash logs
"""
import sys
import os
from pathlib import Path

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from utils.crash_logger import CrashLogger


def view(log_path):
    if not log_path.exists():
        print(f"No crash log found at: {log_path}")
        return
    content = log_path.read_text(encoding='utf-8')
    print(content if content.strip() else "Log file is empty.")


def clear(log_path):
    if not log_path.exists():
        print(f"No crash log to clear at: {log_path}")
        return
    CrashLogger.clear_log()
    print(f"Crash log cleared: {log_path}")


def status(log_path):
    if not log_path.exists():
        print(f"No log file exists at: {log_path}")
        return
    print(f"Log file exists: {log_path}")
    print(f"Size: {log_path.stat().st_size:,} bytes")
    print(f"Number of crashes logged: {CrashLogger.crash_count()}")


COMMANDS = {
    "view": view,
    "clear": clear,
    "exists": status,
    "path": print,
}


def main():
    log_path = Path(CrashLogger.get_log_path())
    if len(sys.argv) < 2:
        print("Simple File Manager Crash Log Manager")
        print(f"Log file location: {log_path}")
        print()
        print("Usage:")
        print(f"  {sys.argv[0]} view    - View the crash log")
        print(f"  {sys.argv[0]} clear   - Clear the crash log")
        print(f"  {sys.argv[0]} path    - Show the log file path")
        print(f"  {sys.argv[0]} exists  - Show size and crash count")
        sys.exit(0)

    command = COMMANDS.get(sys.argv[1].lower())
    if command is None:
        print(f"Unknown command: {sys.argv[1]}")
        print("Use one of: " + ", ".join(COMMANDS))
        sys.exit(1)
    command(log_path)


if __name__ == "__main__":
    main()

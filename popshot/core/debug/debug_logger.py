"""
debug_logger.py
---------------
Category-filtered console logger for the simulation core.

Every line reads "[HH:MM:SS] [Source][TAG] message", where Source is the
calling class (or the module name when called from a function).
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core Engine
        "loading": False,
        "system": True,
        "timing": False,

        # Round Flow
        "round": True,
        "resources": True,

        # Entities
        "entity": False,
        "spawn": True,
        "entity_cleanup": False,
        "combat": True,
        "interaction": True,

        # Events
        "event": True,
        "event_manager": False,
    }


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger; nothing prints unless the category and level allow it."""

    LINE_LENGTH = 59

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4
    }

    # ===========================================================
    # Internals
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Resolve the calling class, or the module name in PascalCase."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        if 'self' in frame.f_locals:
            return type(frame.f_locals['self']).__name__
        if 'cls' in frame.f_locals:
            return frame.f_locals['cls'].__name__

        module_name = frame.f_code.co_filename.replace("\\", "/").split("/")[-1].replace(".py", "")
        return "".join(p.capitalize() for p in module_name.split("_"))

    @staticmethod
    def _should_log(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        level_val = DebugLogger.LEVEL_VALUES[level]
        config_val = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return level_val <= config_val

    @staticmethod
    def _log(tag: str, message: str, color: str, category: str, level: str):
        if not DebugLogger._should_log(category, level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        source = DebugLogger._get_caller()
        print(f"{color}[{timestamp}] [{source}][{tag}] {message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str, category: str = "system"):
        DebugLogger._log("INIT", msg, Colors.WHITE, category, "INFO")

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, Colors.MAGENTA, category, "INFO")

    @staticmethod
    def state(msg: str, category: str = "system"):
        DebugLogger._log("STATE", msg, Colors.CYAN, category, "INFO")

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, Colors.GREEN, category, "INFO")

    @staticmethod
    def trace(msg: str, category: str = "combat"):
        """Verbose trace log, hidden unless LOG_LEVEL is VERBOSE."""
        DebugLogger._log("TRACE", msg, Colors.BLUE, category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, Colors.YELLOW, category, "WARN")

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._log("FAIL", msg, Colors.RED, category, "ERROR")

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a boxed section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str):
        """Print "> Module ........ [OK]"."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        prefix = f"> {module}"
        pad = max(30 - len(prefix), 1)
        dots = max(DebugLogger.LINE_LENGTH - (len(prefix) + pad + 5), 1)
        print(f"{Colors.WHITE}{prefix}{' ' * pad}{'.' * dots} {Colors.GREEN}[OK]{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str):
        """Print an indented detail under the last init entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        print(f"    • {Colors.WHITE}{detail}{Colors.RESET}")

"""
Process exit codes for TodoTask CLI.

Scripts can branch on these instead of parsing error text.
"""

SUCCESS = 0
ERROR_GENERAL = 1
ERROR_INVALID_ARGS = 2  # bad option value or failed validation
ERROR_STORAGE = 4  # vault unreadable, locked or corrupt
ERROR_NOT_FOUND = 5

_NAMES = {
    SUCCESS: "SUCCESS",
    ERROR_GENERAL: "ERROR_GENERAL",
    ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    ERROR_STORAGE: "ERROR_STORAGE",
    ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
}


def get_exit_code_name(code: int) -> str:
    """Symbolic name of ``code`` for log lines, e.g. ``ERROR_NOT_FOUND``."""
    return _NAMES.get(code, f"UNKNOWN({code})")

"""Semantic exit codes for the VibeList CLI.

Scripts can branch on these without parsing output.
"""

SUCCESS = 0
ERROR_GENERAL = 1
ERROR_INVALID_ARGS = 2  # blank task text, ambiguous ID suffix, bad config value
ERROR_NOT_FOUND = 5  # unknown task ID or config key

_EXIT_CODES = {
    SUCCESS: ("SUCCESS", "Command executed successfully"),
    ERROR_GENERAL: ("ERROR_GENERAL", "Unexpected failure"),
    ERROR_INVALID_ARGS: ("ERROR_INVALID_ARGS", "Input was rejected"),
    ERROR_NOT_FOUND: ("ERROR_NOT_FOUND", "No task or setting matched"),
}


def get_exit_code_name(code: int) -> str:
    """Symbolic name for an exit code, used in log lines."""
    if code in _EXIT_CODES:
        return _EXIT_CODES[code][0]
    return f"UNKNOWN({code})"


def get_exit_code_description(code: int) -> str:
    if code in _EXIT_CODES:
        return _EXIT_CODES[code][1]
    return "Unknown error"

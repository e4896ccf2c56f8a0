# dungeon/config/config_display.py
"""
Configuration for text output: format codes and column limits.
"""

# --- Format Codes ---
FORMAT_RED = "[[RED]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
FORMAT_TITLE = FORMAT_YELLOW
FORMAT_HIGHLIGHT = FORMAT_GREEN
FORMAT_SUCCESS = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN

# --- Text Layout ---
TEXT_COLUMNS = 100  # Characters per rendered line
LINE_BREAK_MARKER = "\\\n"

# dungeon/utils/text_formatter.py
from dungeon.config import LINE_BREAK_MARKER, TEXT_COLUMNS

def insert_breaks_at_column_limit(text: str, columns: int = TEXT_COLUMNS) -> str:
    """
    Breaks `text` with a backslash and a newline so no line exceeds `columns`.
    The backslash takes a column, so the character that would have ended a
    full line moves down to start the next one.
    """
    if len(text) <= columns:
        return text
    lines = []
    current = ""
    for character in text:
        if len(current) == columns:
            # Last character falls to the new line to make room for the backslash.
            lines.append(current[:-1])
            current = current[-1]
        current += character
    lines.append(current)
    return LINE_BREAK_MARKER.join(lines)

def function_evaluation_string(function_name: str, argument: str, result: str) -> str:
    """Renders 'name(argument) = result', broken at the column limit."""
    return insert_breaks_at_column_limit(f"{function_name}({argument}) = {result}")

# dungeon/commands/math_commands.py
from typing import Any, List

from dungeon.commands.command_system import command
from dungeon.config import FORMAT_ERROR, FORMAT_RESET
from dungeon.utils.dungeon_math import TIMEOUT, fibonacci
from dungeon.utils.logger import Logger
from dungeon.utils.text_formatter import function_evaluation_string

MISSING_ARGUMENTS_MESSAGE = "This command requires arguments."
INVALID_NUMBER_MESSAGE = "Invalid number format or value."
TIME_LIMIT_MESSAGE = "Calculation exceeded the time limit."

@command("fibonacci", ["fib"], "math", "Shows the n-th element of the fibonacci sequence.\nUsage: fibonacci <n>")
def fibonacci_handler(args: List[str], context: Any) -> str:
    if not args:
        return f"{FORMAT_ERROR}{MISSING_ARGUMENTS_MESSAGE}{FORMAT_RESET}"
    try:
        number = int(args[0])
    except ValueError:
        return f"{FORMAT_ERROR}{INVALID_NUMBER_MESSAGE}{FORMAT_RESET}"
    if number < 1:
        return f"{FORMAT_ERROR}{INVALID_NUMBER_MESSAGE}{FORMAT_RESET}"

    result = fibonacci(number)
    if result == TIMEOUT:
        Logger.info("MathCommands", f"fibonacci({number}) timed out.")
        return TIME_LIMIT_MESSAGE
    return function_evaluation_string("fibonacci", str(number), result)

# dungeon/commands/command_system.py
from typing import Any, Callable, Dict, List, Optional
from functools import wraps

from dungeon.config import FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE, HELP_MAX_COMMANDS_PER_CATEGORY
from dungeon.utils.logger import Logger

# Dictionary to store all registered commands
registered_commands: Dict[str, Dict[str, Any]] = {}
command_groups: Dict[str, List[Dict[str, Any]]] = {
    "interaction": [], "math": [], "system": [], "other": []
}

def command(name: str, aliases: Optional[List[str]] = None, category: str = "other",
           help_text: str = "No help available."):
    """
    Decorator for registering commands. Handlers take (args, context) and return the text to show.
    """
    aliases = aliases or []

    def decorator(func: Callable[[List[str], Any], str]):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category,
        }
        wrapper._command_info = cmd_data # type: ignore

        registered_commands[name] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data

        # Create category if it doesn't exist
        command_groups.setdefault(category, []).append(cmd_data)
        return wrapper
    return decorator

def get_registered_commands() -> Dict[str, Dict[str, Any]]:
    """Get all registered commands."""
    return registered_commands

def get_command_groups() -> Dict[str, List[Dict[str, Any]]]:
    """Get commands organized by category."""
    return command_groups

def unregister_command(name: str) -> bool:
    """Unregister a command and all its aliases."""
    if name not in registered_commands:
        return False

    cmd_data = registered_commands[name]
    cmd_name = cmd_data["name"]

    registered_commands.pop(cmd_name, None)
    for alias in cmd_data["aliases"]:
        registered_commands.pop(alias, None)

    category = cmd_data["category"]
    if category in command_groups:
        command_groups[category] = [c for c in command_groups[category] if c["name"] != cmd_name]
    return True

class CommandProcessor:
    """Processes user input and dispatches commands to appropriate handlers."""

    def process_input(self, text: str, context: Any = None) -> str:
        """
        Process user input and execute the corresponding command using a
        longest-match-first strategy for multi-word commands.
        """
        text = text.strip().lower()
        if not text: return ""
        parts = text.split()

        # Iterate from the longest possible command phrase down to a single word.
        for i in range(len(parts), 0, -1):
            potential_cmd = " ".join(parts[:i])
            if potential_cmd in registered_commands:
                cmd_data = registered_commands[potential_cmd]
                args = parts[i:]

                if context is not None and isinstance(context, dict):
                    context['executed_command_name'] = cmd_data["name"]

                Logger.debug("CommandProcessor", f"Dispatching '{cmd_data['name']}' with args {args}")
                return cmd_data["handler"](args, context)

        return f"{FORMAT_ERROR}Unknown command: {parts[0]}{FORMAT_RESET}"

    def get_help_text(self) -> str:
        """Generate the top-level help text listing categories and their commands."""
        help_text = f"{FORMAT_TITLE}===== Help ====={FORMAT_RESET}\n\n"
        help_text += f"Type '{FORMAT_HIGHLIGHT}help <command>{FORMAT_RESET}' for details on a specific command.\n\n"

        categories = sorted(cat for cat, cmds in command_groups.items() if cmds)
        for category in categories:
            names = sorted({cmd['name'] for cmd in command_groups[category]})
            command_list_str = ", ".join(names[:HELP_MAX_COMMANDS_PER_CATEGORY])
            if len(names) > HELP_MAX_COMMANDS_PER_CATEGORY:
                command_list_str += ", ..."
            help_text += f"  - {FORMAT_CATEGORY}{category.capitalize()}{FORMAT_RESET} ({FORMAT_HIGHLIGHT}{command_list_str}{FORMAT_RESET})\n"
        return help_text

    def get_command_help(self, command_name: str) -> str:
        """Get detailed help for a specific command."""
        name_lower = command_name.lower()
        if name_lower not in registered_commands:
            return f"{FORMAT_ERROR}No help found for '{command_name}'.{FORMAT_RESET}"

        cmd = registered_commands[name_lower]
        help_text = f"{FORMAT_TITLE}Command: {cmd['name'].upper()}{FORMAT_RESET}\n\n"
        help_text += f"{FORMAT_CATEGORY}Category:{FORMAT_RESET} {cmd['category'].capitalize()}\n"
        if cmd['aliases']:
            help_text += f"{FORMAT_CATEGORY}Aliases:{FORMAT_RESET} {', '.join(cmd['aliases'])}\n"
        help_text += f"\n{FORMAT_CATEGORY}Description:{FORMAT_RESET}\n"
        for line in cmd['help_text'].split('\n'):
            help_text += f"  {line}\n"
        return help_text

    def get_command_suggestions(self, partial_command: str) -> List[str]:
        """Get a list of commands that start with the given partial command."""
        partial = partial_command.lower()
        suggestions = set()
        for cmd_data in registered_commands.values():
            if cmd_data['name'].startswith(partial): suggestions.add(cmd_data['name'])
            for alias in cmd_data['aliases']:
                if alias.startswith(partial): suggestions.add(alias)
        return sorted(suggestions)

# dungeon/commands/__init__.py
"""
Commands package initializer.
Importing a command module registers its handlers through the @command decorator.
"""
from .command_system import CommandProcessor, command, get_registered_commands
from . import math_commands

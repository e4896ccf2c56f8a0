# dungeon/game/__init__.py
"""
Game Model Package.
Value types shared by everything that names or measures entities.
"""
from .name import Name, Selectable, name_from_singular
from .percentage import Percentage

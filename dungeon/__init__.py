# dungeon/__init__.py
"""
Match-set library for resolving player queries against named game entities.
"""

from dungeon.game.name import Name, Selectable, name_from_singular
from dungeon.utils.matches import Matches

__all__ = ["Matches", "Name", "Selectable", "name_from_singular"]

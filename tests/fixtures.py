# tests/fixtures.py
import unittest
import sys
import os
from typing import List

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'dungeon'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from dungeon.game.name import Name, name_from_singular
from dungeon.utils.logger import Logger, LogLevel

class MockItem:
    """A minimal selectable entity: a name plus an identity of its own."""
    def __init__(self, name: Name, obj_id: str = ""):
        self.name = name
        self.obj_id = obj_id

    def __repr__(self):
        return f"MockItem({self.name.singular!r}, {self.obj_id!r})"

def make_sword(material: str, obj_id: str = "") -> MockItem:
    return MockItem(name_from_singular(f"{material} sword"), obj_id or f"sword_{material}")

def make_shield(material: str, obj_id: str = "") -> MockItem:
    return MockItem(name_from_singular(f"{material} shield"), obj_id or f"shield_{material}")

class MatchTestBase(unittest.TestCase):
    """Base class for match tests. Silences the logger and provides a standard room of items."""

    def setUp(self):
        self._previous_log_level = Logger.get_level()
        Logger.set_level(LogLevel.CRITICAL)

        self.iron_sword = make_sword("iron", "sword_1")
        self.other_iron_sword = make_sword("iron", "sword_2")
        self.wood_shield = make_shield("wood")
        self.room_items: List[MockItem] = [self.iron_sword, self.other_iron_sword, self.wood_shield]

    def tearDown(self):
        Logger.set_level(self._previous_log_level)

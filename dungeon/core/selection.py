# dungeon/core/selection.py
"""
Turns a Matches object into a decision for the command that asked for it:
nothing found, one clear target, a question back to the player, or every match at once.
"""
from enum import Enum
from typing import Optional, TypeVar

from dungeon.game.name import Selectable
from dungeon.utils.matches import Matches

T = TypeVar("T", bound=Selectable)

class MatchOutcome(Enum):
    NO_MATCH = "no_match"
    UNAMBIGUOUS = "unambiguous"
    AMBIGUOUS = "ambiguous"
    BULK = "bulk"

def classify_matches(matches: Matches) -> MatchOutcome:
    if matches.size() == 0:
        return MatchOutcome.NO_MATCH
    if not matches.is_disjoint():
        return MatchOutcome.BULK
    # Several elements sharing one name are interchangeable.
    if matches.get_different_names() == 1:
        return MatchOutcome.UNAMBIGUOUS
    return MatchOutcome.AMBIGUOUS

def select_target(matches: 'Matches[T]') -> Optional[T]:
    """Returns the element to act on if the matches are unambiguous, else None."""
    if classify_matches(matches) is MatchOutcome.UNAMBIGUOUS:
        return matches.get(0)
    return None

def ambiguity_message(matches: Matches, noun: str = "items") -> str:
    """Builds the disambiguation prompt, e.g. 'Which one? There are 3 different swords.'"""
    if classify_matches(matches) is not MatchOutcome.AMBIGUOUS:
        raise ValueError("ambiguity_message() requires disjoint matches with more than one name.")
    return f"Which one? There are {matches.get_different_names()} different {noun}."

# dungeon/utils/matches.py
from typing import Generic, Iterable, Iterator, List, Set, TypeVar

from dungeon.game.name import Name, Selectable
from dungeon.utils.logger import Logger

T = TypeVar("T", bound=Selectable)


class Matches(Generic[T]):
    """
    A collection of Selectable objects that match a given query.

    Disjoint matches (the default) are resolved by any single element, as in
    "take sword". Matches that are not disjoint only constitute a match when
    taken all together, as in "take all swords".

    Elements keep their insertion order. Not thread-safe: callers sharing an
    instance must serialize add() against reads of the distinct name count.
    """

    def __init__(self, disjoint: bool = True):
        self._matches: List[T] = []
        self._disjoint = disjoint
        self._different_names = 0
        self._different_names_up_to_date = True

    @classmethod
    def from_collection(cls, collection: Iterable[T], disjoint: bool = True) -> 'Matches[T]':
        """Converts any finite iterable to Matches, keeping its iteration order."""
        new_instance: 'Matches[T]' = cls(disjoint)
        for element in collection:
            new_instance.add(element)
        return new_instance

    @property
    def disjoint(self) -> bool:
        return self._disjoint

    def is_disjoint(self) -> bool:
        """
        Returns whether or not the Matches are disjoint.
        If they are, any element constitutes a match, otherwise, only all elements together do.
        """
        return self._disjoint

    def add(self, match: T):
        self._matches.append(match)
        # Always invalidate, even for a repeated name.
        self._different_names_up_to_date = False

    def get(self, index: int) -> T:
        """Returns the match at the given insertion position. Negative indices are rejected."""
        if not 0 <= index < len(self._matches):
            raise IndexError(f"Match index {index} out of range for {len(self._matches)} matches.")
        return self._matches[index]

    def to_list(self) -> List[T]:
        return list(self._matches)

    def has_match_with_name(self, name: Name) -> bool:
        """Returns True if there is a match with the given name, False otherwise."""
        for match in self._matches:
            if match.name == name:
                return True
        return False

    def size(self) -> int:
        return len(self._matches)

    def get_different_names(self) -> int:
        """
        Returns how many different names the matches have. Two swords named
        'iron sword' count once.

        The count is recalculated only if matches were added since the last
        call, so after building the Matches, repeated calls are O(1).
        """
        if not self._different_names_up_to_date:
            self._update_different_names_count()
        return self._different_names

    def _update_different_names_count(self):
        unique_names: Set[Name] = set()
        for match in self._matches:
            unique_names.add(match.name)
        self._different_names = len(unique_names)
        self._different_names_up_to_date = True
        Logger.debug("Matches", f"Recounted names: {self._different_names} distinct among {len(self._matches)} matches.")

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"Matches(disjoint={self._disjoint}, matches={self._matches!r})"

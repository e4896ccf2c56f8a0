# dungeon/game/name.py
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class Name:
    """
    The name of an entity, in singular and plural form.
    Equality and hashing are defined over the two strings, so two swords
    created independently share the same Name.
    """
    singular: str
    plural: str

    def quantified(self, amount: int) -> str:
        """Returns '1 sword' or '3 swords'."""
        return f"{amount} {self.singular if amount == 1 else self.plural}"

    def __str__(self) -> str:
        return self.singular


def name_from_singular(singular: str, plural: Optional[str] = None) -> Name:
    """Builds a Name, deriving a simple 's' plural when none is given."""
    if plural is None:
        plural = singular if singular.endswith('s') else singular + "s"
    return Name(singular, plural)


@runtime_checkable
class Selectable(Protocol):
    """Anything that can be picked out of a room or inventory by its name."""
    name: Name

# dungeon/game/percentage.py

class Percentage:
    """A fraction in the range [0.0, 1.0], printed as a percentage."""

    def __init__(self, value: float):
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Percentage must be between 0.0 and 1.0, got {value}.")
        self._value = float(value)

    @classmethod
    def from_string(cls, text: str) -> 'Percentage':
        """Parses '50%' (or '50') into Percentage(0.5)."""
        stripped = text.strip()
        if stripped.endswith('%'):
            stripped = stripped[:-1]
        try:
            number = float(stripped)
        except ValueError:
            raise ValueError(f"Invalid percentage '{text}'.")
        return cls(number / 100.0)

    def to_float(self) -> float:
        return self._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Percentage):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return f"{self._value * 100:.2f}%"

    def __repr__(self) -> str:
        return f"Percentage({self._value})"

"""Card, Color and per-card knowledge types for Hanabi."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Tuple


class Color(str, Enum):
    """Card colors. MULTICOLOR only exists when the variant is enabled."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    WHITE = "white"
    YELLOW = "yellow"
    MULTICOLOR = "multicolor"


COLORS: Tuple[Color, ...] = tuple(Color)
BASE_COLORS: Tuple[Color, ...] = COLORS[:5]
NUMBERS = (1, 2, 3, 4, 5)


class Knowledge(IntEnum):
    """What a hint tells about one color or one number of a card."""

    IMPOSSIBLE = 0
    POSSIBLE = 1
    CERTAIN = 2


def _check_vector(name: str, vector: Tuple[Knowledge, ...], size: int) -> None:
    if len(vector) != size:
        raise ValueError(f"{name} knowledge must have {size} entries, got {len(vector)}")
    certain = [k for k in vector if k == Knowledge.CERTAIN]
    if len(certain) > 1:
        raise ValueError(f"{name} knowledge has more than one certain value")
    if certain and any(k == Knowledge.POSSIBLE for k in vector):
        raise ValueError(f"{name} knowledge is certain but still has possible values")


@dataclass(frozen=True)
class CardKnowledge:
    """Tri-state possibility markers for one card.

    colors has one entry per Color (in enum order). numbers is indexed by
    number, slot 0 is unused and stays IMPOSSIBLE.
    """

    colors: Tuple[Knowledge, ...]
    numbers: Tuple[Knowledge, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(Knowledge(k) for k in self.colors))
        object.__setattr__(self, "numbers", tuple(Knowledge(k) for k in self.numbers))
        _check_vector("color", self.colors, len(COLORS))
        _check_vector("number", self.numbers, len(NUMBERS) + 1)
        if self.numbers[0] != Knowledge.IMPOSSIBLE:
            raise ValueError("number slot 0 is unused and must stay impossible")

    def color(self, color: Color) -> Knowledge:
        return self.colors[COLORS.index(Color(color))]

    def number(self, number: int) -> Knowledge:
        return self.numbers[number]

    def possible_colors(self) -> List[Color]:
        return [c for c, k in zip(COLORS, self.colors) if k != Knowledge.IMPOSSIBLE]

    def possible_numbers(self) -> List[int]:
        return [n for n in NUMBERS if self.numbers[n] != Knowledge.IMPOSSIBLE]

    def certain_color(self) -> Optional[Color]:
        for c, k in zip(COLORS, self.colors):
            if k == Knowledge.CERTAIN:
                return c
        return None

    def certain_number(self) -> Optional[int]:
        for n in NUMBERS:
            if self.numbers[n] == Knowledge.CERTAIN:
                return n
        return None

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            "color": {c.value: int(k) for c, k in zip(COLORS, self.colors)},
            "number": {str(n): int(k) for n, k in enumerate(self.numbers)},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CardKnowledge":
        colors = data["color"]
        numbers = data["number"]
        return cls(
            colors=tuple(Knowledge(colors.get(c.value, 0)) for c in COLORS),
            numbers=tuple(
                Knowledge(numbers.get(str(n), numbers.get(n, 0))) for n in range(len(NUMBERS) + 1)
            ),
        )


@dataclass(frozen=True)
class Card:
    """A Hanabi card.

    Two cards are equal when color and number match; the attached knowledge
    (what the holder was told about it) is ignored for equality.
    """

    color: Color
    number: int
    knowledge: Optional[CardKnowledge] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", Color(self.color))
        if self.number not in NUMBERS:
            raise ValueError(f"Invalid card number: {self.number}")

    def with_knowledge(self, knowledge: Optional[CardKnowledge]) -> "Card":
        return Card(color=self.color, number=self.number, knowledge=knowledge)

    def __str__(self) -> str:
        return f"{self.color.value} {self.number}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"color": self.color.value, "number": self.number}
        if self.knowledge is not None:
            data["hint"] = self.knowledge.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Card":
        hint = data.get("hint")
        return cls(
            color=Color(data["color"]),
            number=int(data["number"]),
            knowledge=CardKnowledge.from_dict(hint) if hint is not None else None,
        )


class HintType(str, Enum):
    """Which attribute a hint is about."""

    COLOR = "color"
    NUMBER = "number"

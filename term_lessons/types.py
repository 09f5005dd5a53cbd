from enum import Enum
from dataclasses import dataclass, field
from collections.abc import Iterable


class DotDict(dict):
    def __init__(self, other_dict={}, **kwargs):
        super().__init__(**kwargs)
        for k, v in other_dict.items():
            if isinstance(v, dict):
                v = DotDict(v)
            self[k.lower()] = v

    def __getattr__(self, attr):
        try:
            return self[attr.lower()]
        except KeyError:
            raise AttributeError(attr)

    def __setattr__(self, attr, value):
        self[attr.lower()] = value

    def __delattr__(self, attr):
        try:
            del self[attr.lower()]
        except KeyError:
            raise AttributeError(attr)


class Position(tuple):
    """ A (column, row) cell address. Column grows rightward, row grows downward. """
    x: int
    y: int

    def __new__(cls, x, y):
        return super(Position, cls).__new__(cls, (int(x), int(y)))

    def __reduce__(self):
        return (self.__class__, (self[0], self[1]))

    def __add__(self, other):
        if isinstance(other, Iterable):
            return Position(self.x + other[0], self.y + other[1])
        elif isinstance(other, int):
            return Position(self.x + other, self.y + other)
        else:
            raise ValueError(f"Can't add {self} and {other}")

    def __sub__(self, other):
        if isinstance(other, Iterable):
            return Position(self.x - other[0], self.y - other[1])
        elif isinstance(other, int):
            return Position(self.x - other, self.y - other)
        else:
            raise ValueError(f"Can't sub {self} and {other}")

    def __eq__(self, other):
        return (
                (isinstance(other, tuple) or isinstance(other, list)) and
                len(self) == len(other) and
                self.x == other[0] and
                self.y == other[1]
            )

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.x, self.y))

    def with_relative_column(self, delta: int) -> 'Position':
        return Position(self.x + delta, self.y)

    def with_relative_row(self, delta: int) -> 'Position':
        return Position(self.x, self.y + delta)

    def with_column(self, column: int) -> 'Position':
        return Position(column, self.y)

    @property
    def x(self) -> int:
        return self[0]

    @property
    def y(self) -> int:
        return self[1]

    def __repr__(self):
        return f"Position(x={self[0]}, y={self[1]})"

    def __str__(self):
        return repr(self)


class AnsiColor(Enum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    DEFAULT = 9


class SGR(Enum):
    BOLD = 1
    UNDERLINE = 4
    BLINK = 5
    REVERSE = 7


RGB = tuple[int, int, int]
Color = AnsiColor | RGB


@dataclass(frozen=True)
class Cell:
    char: str = " "
    fg: Color | None = None
    bg: Color | None = None
    sgr: frozenset[SGR] = field(default_factory=frozenset)

    def __post_init__(self):
        if len(self.char) != 1:
            raise ValueError(f"A cell holds exactly one character, got {self.char!r}")
        if not isinstance(self.sgr, frozenset):
            object.__setattr__(self, "sgr", frozenset(self.sgr))


BLANK = Cell(" ")


class KeyType(Enum):
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    ESCAPE = "Escape"
    ENTER = "Enter"
    BACKSPACE = "Backspace"
    CHARACTER = "Character"
    EOF = "EOF"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class KeyStroke:
    key_type: KeyType
    character: str | None = None

    @classmethod
    def from_char(cls, ch: str) -> 'KeyStroke':
        return cls(KeyType.CHARACTER, ch)

    def __str__(self):
        return f"keyStroke.key_type: {self.key_type.value} keyStroke.character: {self.character}"


class TerminationReason(Enum):
    QUIT = "quit"
    END_OF_INPUT = "end_of_input"


@dataclass
class LoopState:
    position: Position
    glyph: str

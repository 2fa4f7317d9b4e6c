"""Messages of several shapes and a state that reacts to them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on the grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the state to stop."""


@dataclass(frozen=True)
class Echo:
    """Print a piece of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Switch to a new (red, green, blue) colour."""

    color: tuple[int, int, int]


Message = Quit | Echo | Move | ChangeColor


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Quit():
                self.quit = True
            case Echo(text=text):
                self.echo(text)
            case Move(point=point):
                self.move_position(point)
            case ChangeColor(color=color):
                self.change_color(color)
            case _:
                raise TypeError(f"not a message: {message!r}")
"""
Text commands for driving a `Turtle`.

A program is a list of lines such as `forward 100` or `color 0xFF0000`.
Numbers are parsed with `int(s, 0)` where possible, so hex works, and fall
back to floats. Colours given as a single number are 0xRRGGBB and made
opaque; three or four numbers are taken as r g b [a]. Colours out of range
and non-finite numbers make the line invalid.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import Literal, cast

import yaml

from .draw import rgba
from .turtle import Turtle

logger = getLogger(__name__)

Command = Literal[
    "forward", "backward", "left", "right", "goto", "heading", "penup",
    "pendown", "color", "width", "fillcolor", "beginfill", "endfill", "rect",
    "polygon", "circle", "home", "clear", "reset",
]

ALIASES: dict[str, Command] = {
    "fd": "forward",
    "bk": "backward",
    "lt": "left",
    "rt": "right",
    "pu": "penup",
    "pd": "pendown",
}


@dataclass
class Program:
    commands: list[str] = field(default_factory=list[str])
    width: int | None = None
    height: int | None = None
    background: int | None = None
    """Background as 0xRRGGBB"""


def _number(s: str) -> int | float:
    try:
        return int(s, 0)
    except ValueError:
        v = float(s)
    if not math.isfinite(v):
        raise ValueError(f"not a finite number: {s}")
    return v


def _color(args: list[int | float]) -> int | None:
    match [int(a) for a in args]:
        case [c] if 0 <= c <= 0xFFFFFF:
            return (c << 8) | 0xFF
        case [*parts] if len(parts) in (3, 4) and all(0 <= p <= 0xFF for p in parts):
            return rgba(*parts)
        case _:
            return None


class TurtleScript:
    def __init__(self, turtle: Turtle):
        self.turtle: Turtle = turtle

    def add_text_command(self, s: str) -> bool:
        """Run one command line. Returns False if it was skipped."""
        s = s.split("#", 1)[0].strip()
        if not s:
            return False

        parts = s.split()
        name = parts[0].lower()
        cmd = ALIASES.get(name, cast("Command", name))
        try:
            args = [_number(a) for a in parts[1:]]
        except ValueError:
            logger.warning(f"Bad arguments in '{s}'")
            return False

        t = self.turtle
        match cmd, args:
            case "forward", [d]:
                t.forward(d)
            case "backward", [d]:
                t.backward(d)
            case "left", [deg]:
                t.left(deg)
            case "right", [deg]:
                t.right(deg)
            case "goto", [x, y]:
                t.goto(x, y)
            case "heading", [deg]:
                t.set_heading(deg)
            case "penup", []:
                t.pen_up()
            case "pendown", []:
                t.pen_down()
            case "color", _ if _color(args) is not None:
                t.set_color(_color(args))
            case "width", [w]:
                t.set_width(w)
            case "fillcolor", _ if _color(args) is not None:
                t.fill_color(_color(args))
            case "beginfill", []:
                t.begin_fill()
            case "endfill", []:
                t.end_fill()
            case "rect", [w, h]:
                t.rect(w, h)
            case "polygon", [n, side]:
                t.polygon(int(n), side)
            case "circle", [r]:
                t.circle(r)
            case "home", []:
                t.home()
            case "clear", []:
                t.clear()
            case "reset", []:
                t.reset()
            case _:
                logger.warning(f"Unhandled cmd '{s}'")
                return False
        return True

    def run(self, lines: Iterable[str]) -> int:
        """Run every line, returning how many commands were executed."""
        return sum(1 for line in lines if self.add_text_command(line))


def _int_field(data: dict[str, object], key: str, lo: int, hi: int | None = None) -> int | None:
    v = data.get(key)
    if v is None:
        return None
    if isinstance(v, str):
        v = int(v, 0)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ValueError(f"{key} must be an integer, got {v!r}")
    if v < lo or (hi is not None and v > hi):
        raise ValueError(f"{key} out of range: {v}")
    return v


def parse_program(data: object) -> Program:
    """Build a `Program` from already-loaded YAML data."""
    if isinstance(data, list):
        return Program(commands=[str(c) for c in data])
    if isinstance(data, dict) and isinstance(data.get("commands"), list):
        return Program(
            commands=[str(c) for c in data["commands"]],
            width=_int_field(data, "width", 1),
            height=_int_field(data, "height", 1),
            background=_int_field(data, "background", 0, 0xFFFFFF),
        )
    raise ValueError("program must be a list of commands or a mapping with 'commands'")


def load_program(path: Path) -> Program:
    with open(path, encoding="utf-8") as f:
        return parse_program(yaml.safe_load(f))

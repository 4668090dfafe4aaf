from dataclasses import dataclass
from pathlib import Path


class HexInt(int):
    def __repr__(self) -> str:  # used in help default printing
        return f"{int(self):06x}"

    __str__ = __repr__


@dataclass
class TurtleConfig:
    program: Path | None = None
    """YAML turtle program to render. Renders the demo when not given"""

    output: Path = Path("turtle.png")
    """PNG file to write"""

    width: int = 1024
    height: int = 768

    background: int = HexInt(0xFFFFFF)
    """Canvas background as RRGGBB"""

    demo: str = "demo"
    """Built-in drawing to use without a program: demo or demo2"""

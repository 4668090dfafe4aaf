#!/usr/bin/env python
import logging
from typing import cast

import jsonargparse

from .demos import DEMOS
from .script import TurtleScript, load_program
from .turtle import Turtle
from .turtle_config import TurtleConfig

logger = logging.getLogger(__name__)


def render(args: TurtleConfig) -> Turtle:
    """Draw the program or demo selected by `args` onto a new turtle."""
    width, height, background = args.width, args.height, args.background
    program = None
    if args.program is not None:
        program = load_program(args.program)
        width = program.width or width
        height = program.height or height
        if program.background is not None:
            background = program.background
    elif args.demo not in DEMOS:
        raise ValueError(f"Unknown demo '{args.demo}', expected one of {sorted(DEMOS)}")
    if not 0 <= background <= 0xFFFFFF:
        raise ValueError(f"background must be 0xRRGGBB, got {background:#x}")

    turtle = Turtle(width, height, (background << 8) | 0xFF)
    if program is not None:
        count = TurtleScript(turtle).run(program.commands)
        logger.info(f"Ran {count} of {len(program.commands)} commands")
    else:
        logger.info(f"Drawing {args.demo}")
        DEMOS[args.demo](turtle)
    return turtle


def main(argv: list[str] | None = None):
    jsonargparse.set_parsing_settings(docstring_parse_attribute_docstrings=True)

    args = cast(
        "TurtleConfig",
        jsonargparse.auto_cli(TurtleConfig, args=argv, as_positional=True),  # pyright: ignore[reportUnknownMemberType]
    )

    turtle = render(args)
    path = turtle.save_png(args.output)
    logger.info(f"Saved {path}")
    print(path)


if __name__ == "__main__":
    main()

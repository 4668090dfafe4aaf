"""Main entry point for running turtlepix as a module."""
import logging
from typing import override

from .main import main


class IndentMultiline(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord):
        s = super().format(record)
        head, *rest = s.splitlines()
        if rest:
            rest = ["    " + line for line in rest]
            return "\n".join([head, *rest])
        return s


fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
handler = logging.FileHandler("turtlepix.log", encoding="utf-8")
handler.setFormatter(IndentMultiline(fmt))
logger = logging.getLogger()
logger.setLevel(logging.DEBUG)
logger.addHandler(handler)


if __name__ == "__main__":
    main()

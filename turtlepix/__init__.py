"""Turtle graphics rendered into a plain pixel buffer."""

from .draw import PixelCanvas, rgba
from .turtle import Turtle

__all__ = ["PixelCanvas", "Turtle", "rgba"]

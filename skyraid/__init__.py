"""A vertical-scrolling arcade shooter: game rules, sprites and a pygame window."""

__version__ = "0.1.0"
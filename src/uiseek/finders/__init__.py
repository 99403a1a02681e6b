"""Finders and the ``by`` construction facade."""

from . import by
from .finder import ChainFinder, Finder, MatchFinder, chain

__all__ = [
    "by",
    "Finder",
    "MatchFinder",
    "ChainFinder",
    "chain",
]

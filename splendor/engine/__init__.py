"""Moteur de règles: état, validation, primitives de plateau et commandes."""

from . import rules  # re-export for convenience
from .engine import GameEngine

__all__ = ["rules", "GameEngine"]

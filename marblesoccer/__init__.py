"""Marble soccer physics simulation: field, ball physics, game rules, pygame view and command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]
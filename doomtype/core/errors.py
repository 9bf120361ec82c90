from __future__ import annotations


class DoomtypeError(Exception):
    """Base class for errors raised by doomtype."""


class PromptError(DoomtypeError):
    """The prompt provider could not produce a usable prompt."""

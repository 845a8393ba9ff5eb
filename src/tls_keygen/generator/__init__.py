"""Key generation entry points."""

from .keygen import KeyGenerator, generate

__all__ = ["KeyGenerator", "generate"]

"""Private key resource lifecycle."""

from .private_key import PrivateKeyResource, PrivateKeyState

__all__ = ["PrivateKeyResource", "PrivateKeyState"]

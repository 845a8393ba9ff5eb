"""TLS keygen - private key generation with PEM and OpenSSH encodings."""

from .core import (
    Algorithm,
    ECDSACurve,
    EncodedKeyMaterial,
    KeyPair,
    KeyRequest,
    SSHPublicKey,
    generate_keypair,
    encode_private_key,
    derive_public_key,
    parse_private_key_pem,
)
from .generator import KeyGenerator, generate
from .resource import PrivateKeyResource, PrivateKeyState

__version__ = "0.1.0"

__all__ = [
    # Generator
    "KeyGenerator",
    "generate",
    # Core
    "Algorithm",
    "ECDSACurve",
    "EncodedKeyMaterial",
    "KeyPair",
    "KeyRequest",
    "SSHPublicKey",
    "generate_keypair",
    "encode_private_key",
    "derive_public_key",
    "parse_private_key_pem",
    # Resource
    "PrivateKeyResource",
    "PrivateKeyState",
]

"""Core functionality for tls-keygen."""

from .encoding import derive_public_key, encode_private_key
from .errors import (
    TLSKeygenError,
    InvalidParameterError,
    ConfigurationError,
    GenerationError,
    EncodingError,
    KeyParseError,
    ResourceStateError,
)
from .keys import (
    KeyPair,
    RSAKeyPair,
    ECDSAKeyPair,
    Ed25519KeyPair,
    generate_keypair,
    parse_private_key_pem,
)
from .models import (
    Algorithm,
    ECDSACurve,
    EncodedKeyMaterial,
    KeyRequest,
    SSHPublicKey,
)
from .pem import pem_decode, pem_encode
from .ssh import md5_fingerprint, ssh_public_key, ssh_wire_blob

__all__ = [
    # Keys
    "KeyPair",
    "RSAKeyPair",
    "ECDSAKeyPair",
    "Ed25519KeyPair",
    "generate_keypair",
    "parse_private_key_pem",
    # Encoding
    "encode_private_key",
    "derive_public_key",
    "pem_encode",
    "pem_decode",
    "md5_fingerprint",
    "ssh_public_key",
    "ssh_wire_blob",
    # Errors
    "TLSKeygenError",
    "InvalidParameterError",
    "ConfigurationError",
    "GenerationError",
    "EncodingError",
    "KeyParseError",
    "ResourceStateError",
    # Models
    "Algorithm",
    "ECDSACurve",
    "EncodedKeyMaterial",
    "KeyRequest",
    "SSHPublicKey",
]

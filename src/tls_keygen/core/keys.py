"""Key pair variants and algorithm dispatch."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from .errors import GenerationError, InvalidParameterError, KeyParseError
from .models import Algorithm, ECDSACurve, KeyRequest
from .pem import pem_decode

log = logging.getLogger(__name__)

RSA_PUBLIC_EXPONENT = 65537

CURVES: dict[ECDSACurve, type[ec.EllipticCurve]] = {
    ECDSACurve.P224: ec.SECP224R1,
    ECDSACurve.P256: ec.SECP256R1,
    ECDSACurve.P384: ec.SECP384R1,
    ECDSACurve.P521: ec.SECP521R1,
}

# Curves with an "ecdsa-sha2-nistp*" OpenSSH key type. P224 has none.
SSH_CURVES = frozenset({ECDSACurve.P256, ECDSACurve.P384, ECDSACurve.P521})


class KeyPair(ABC):
    """A freshly generated private key tagged with its algorithm.

    Each variant supplies what the encoding stages need: the private key
    body and its PEM label, and whether an OpenSSH public key exists.
    """

    algorithm: ClassVar[Algorithm]
    pem_label: ClassVar[str]

    @property
    @abstractmethod
    def private_key(self):
        """The underlying ``cryptography`` private key object."""

    @abstractmethod
    def private_body(self) -> bytes:
        """Bytes placed inside the private key PEM block."""

    def public_der(self) -> bytes:
        """PKIX (SubjectPublicKeyInfo) DER of the public half."""
        return self.private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def has_ssh_encoding(self) -> bool:
        return True

    def openssh_line(self) -> Optional[str]:
        """OpenSSH authorized_keys line, or None if the key has no SSH type."""
        if not self.has_ssh_encoding():
            return None
        return (
            self.private_key.public_key()
            .public_bytes(
                encoding=serialization.Encoding.OpenSSH,
                format=serialization.PublicFormat.OpenSSH,
            )
            .decode("ascii")
        )


@dataclass(frozen=True)
class RSAKeyPair(KeyPair):
    """RSA key, serialized as PKCS#1."""

    key: rsa.RSAPrivateKey

    algorithm: ClassVar[Algorithm] = Algorithm.RSA
    pem_label: ClassVar[str] = "RSA PRIVATE KEY"

    @property
    def private_key(self) -> rsa.RSAPrivateKey:
        return self.key

    def private_body(self) -> bytes:
        return self.key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )


@dataclass(frozen=True)
class ECDSAKeyPair(KeyPair):
    """ECDSA key on one of the NIST curves, serialized as SEC1."""

    key: ec.EllipticCurvePrivateKey
    curve: ECDSACurve

    algorithm: ClassVar[Algorithm] = Algorithm.ECDSA
    pem_label: ClassVar[str] = "EC PRIVATE KEY"

    @property
    def private_key(self) -> ec.EllipticCurvePrivateKey:
        return self.key

    def private_body(self) -> bytes:
        return self.key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def has_ssh_encoding(self) -> bool:
        return self.curve in SSH_CURVES


@dataclass(frozen=True)
class Ed25519KeyPair(KeyPair):
    """Ed25519 key; the PEM body is the bare 32-byte seed."""

    key: ed25519.Ed25519PrivateKey

    algorithm: ClassVar[Algorithm] = Algorithm.ED25519
    pem_label: ClassVar[str] = "ED25519 PRIVATE KEY"

    @property
    def private_key(self) -> ed25519.Ed25519PrivateKey:
        return self.key

    def private_body(self) -> bytes:
        return self.key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )


def _generate_rsa(request: KeyRequest) -> RSAKeyPair:
    try:
        key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT, key_size=request.rsa_bits
        )
    except (ValueError, TypeError, OverflowError) as e:
        raise GenerationError(
            f"cannot generate {request.rsa_bits}-bit RSA key: {e}"
        ) from e
    return RSAKeyPair(key=key)


def _generate_ecdsa(request: KeyRequest) -> ECDSAKeyPair:
    curve = CURVES[request.ecdsa_curve]
    try:
        key = ec.generate_private_key(curve())
    except ValueError as e:
        raise GenerationError(
            f"cannot generate ECDSA key on {request.ecdsa_curve.value}: {e}"
        ) from e
    return ECDSAKeyPair(key=key, curve=request.ecdsa_curve)


def _generate_ed25519(request: KeyRequest) -> Ed25519KeyPair:
    return Ed25519KeyPair(key=ed25519.Ed25519PrivateKey.generate())


_GENERATORS = {
    Algorithm.RSA: _generate_rsa,
    Algorithm.ECDSA: _generate_ecdsa,
    Algorithm.ED25519: _generate_ed25519,
}


def generate_keypair(request: KeyRequest) -> KeyPair:
    """Generate a new key pair for the requested algorithm.

    Args:
        request: Validated key request

    Returns:
        A new KeyPair variant; never shared between calls

    Raises:
        GenerationError: If the primitive rejects the parameters
    """
    if request.algorithm is Algorithm.RSA:
        log.debug("generating %d-bit RSA key", request.rsa_bits)
    elif request.algorithm is Algorithm.ECDSA:
        log.debug("generating ECDSA key on %s", request.ecdsa_curve.value)
    else:
        log.debug("generating %s key", request.algorithm.value)
    return _GENERATORS[request.algorithm](request)


def _curve_of(key: ec.EllipticCurvePrivateKey) -> ECDSACurve:
    for name, curve in CURVES.items():
        if isinstance(key.curve, curve):
            return name
    raise InvalidParameterError(f"unsupported ECDSA curve {key.curve.name!r}")


def parse_private_key_pem(algorithm: Algorithm | str, pem: str) -> KeyPair:
    """Load a private key PEM produced by the encoder back into a KeyPair.

    Args:
        algorithm: Algorithm the PEM document was generated with
        pem: PEM text

    Returns:
        KeyPair of the matching variant

    Raises:
        InvalidParameterError: Unknown algorithm or unsupported curve
        KeyParseError: If the document is not a key of that algorithm
    """
    try:
        algorithm = Algorithm(algorithm)
    except ValueError as e:
        raise InvalidParameterError(
            f"invalid algorithm {algorithm!r}; must be RSA, ECDSA or ED25519"
        ) from e

    if algorithm is Algorithm.ED25519:
        seed = pem_decode(pem, Ed25519KeyPair.pem_label)
        try:
            return Ed25519KeyPair(
                key=ed25519.Ed25519PrivateKey.from_private_bytes(seed)
            )
        except ValueError as e:
            raise KeyParseError(f"invalid Ed25519 seed: {e}") from e

    if algorithm is Algorithm.RSA:
        label = RSAKeyPair.pem_label
    else:
        label = ECDSAKeyPair.pem_label
    der = pem_decode(pem, label)
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError) as e:
        raise KeyParseError(f"failed to parse {label}: {e}") from e

    if algorithm is Algorithm.RSA:
        if not isinstance(key, rsa.RSAPrivateKey):
            raise KeyParseError("PEM body is not an RSA private key")
        return RSAKeyPair(key=key)

    if not isinstance(key, ec.EllipticCurvePrivateKey):
        raise KeyParseError("PEM body is not an EC private key")
    return ECDSAKeyPair(key=key, curve=_curve_of(key))

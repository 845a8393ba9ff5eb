"""Core data models for tls-keygen."""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .errors import ConfigurationError, InvalidParameterError


class Algorithm(str, Enum):
    """Supported key algorithms."""

    RSA = "RSA"
    ECDSA = "ECDSA"
    ED25519 = "ED25519"


class ECDSACurve(str, Enum):
    """Supported NIST curves for ECDSA keys."""

    P224 = "P224"
    P256 = "P256"
    P384 = "P384"
    P521 = "P521"


_PARAMETER_HINTS = {
    "algorithm": "must be RSA, ECDSA or ED25519",
    "ecdsa_curve": "must be P224, P256, P384 or P521",
    "rsa_bits": "must be a positive integer",
}


def _describe(error: ValidationError) -> str:
    """Render a pydantic validation error as a one-line parameter message."""
    messages = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"])
        hint = _PARAMETER_HINTS.get(field, err["msg"])
        if err["type"] == "missing":
            messages.append(f"missing {field}")
        elif err["type"] == "extra_forbidden":
            messages.append(f"unknown parameter {field}")
        else:
            messages.append(f"invalid {field} {err['input']!r}; {hint}")
    return ", ".join(messages)


class KeyRequest(BaseModel):
    """Parameters for generating a new key pair."""

    algorithm: Algorithm = Field(description="Name of the algorithm to use")
    rsa_bits: int = Field(
        default=2048, gt=0, description="Modulus size in bits (RSA only)"
    )
    ecdsa_curve: ECDSACurve = Field(
        default=ECDSACurve.P224, description="Named curve (ECDSA only)"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="before")
    @classmethod
    def drop_unused_parameters(cls, data: Any) -> Any:
        """Discard parameters the requested algorithm does not read.

        rsa_bits only applies to RSA and ecdsa_curve only to ECDSA; for any
        other algorithm they keep their defaults and are never validated.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        algorithm = data.get("algorithm")
        if algorithm != Algorithm.RSA:
            data.pop("rsa_bits", None)
        if algorithm != Algorithm.ECDSA:
            data.pop("ecdsa_curve", None)
        return data

    @classmethod
    def from_params(cls, **params: Any) -> "KeyRequest":
        """Build a request, reporting bad values as InvalidParameterError.

        Parameters set to None fall back to their defaults.

        Raises:
            InvalidParameterError: If any parameter is unknown or invalid
        """
        data = {key: value for key, value in params.items() if value is not None}
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidParameterError(_describe(e)) from e

    @classmethod
    def from_config(cls, config_path: str | Path) -> "KeyRequest":
        """Load a key request from a YAML configuration file.

        Args:
            config_path: Path to YAML config file

        Returns:
            KeyRequest instance

        Raises:
            ConfigurationError: If config file cannot be read or parsed
            InvalidParameterError: If the file holds invalid parameters
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load key request: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Key request config must be a mapping, got {type(data).__name__}"
            )

        return cls.from_params(**data)


class SSHPublicKey(BaseModel):
    """OpenSSH authorized_keys line and its legacy MD5 fingerprint."""

    line: str = Field(description='e.g. "ssh-ed25519 AAAA..."')
    fingerprint_md5: str = Field(description="Colon separated lowercase hex")

    model_config = {"frozen": True}


class EncodedKeyMaterial(BaseModel):
    """Serialized outputs of a single key generation."""

    private_key_pem: str = Field(description="Algorithm specific private key PEM")
    public_key_pem: str = Field(description="PKIX public key PEM")
    ssh: Optional[SSHPublicKey] = Field(
        default=None, description="Absent when the key has no SSH encoding"
    )

    model_config = {"frozen": True}

    @property
    def public_key_openssh(self) -> str:
        return self.ssh.line if self.ssh else ""

    @property
    def public_key_fingerprint_md5(self) -> str:
        return self.ssh.fingerprint_md5 if self.ssh else ""

    def to_outputs(self) -> dict[str, str]:
        """Return the four named string outputs."""
        return {
            "private_key_pem": self.private_key_pem,
            "public_key_pem": self.public_key_pem,
            "public_key_openssh": self.public_key_openssh,
            "public_key_fingerprint_md5": self.public_key_fingerprint_md5,
        }

"""OpenSSH public key lines and legacy MD5 fingerprints."""

import base64
import binascii

from cryptography.hazmat.primitives import hashes

from .errors import EncodingError
from .models import SSHPublicKey


def ssh_wire_blob(line: str) -> bytes:
    """Decode the SSH wire format blob from an authorized_keys line.

    Args:
        line: e.g. "ssh-rsa AAAAB3NzaC1yc2E..."

    Returns:
        Raw length-prefixed key blob
    """
    parts = line.split()
    if len(parts) < 2:
        raise EncodingError(f"malformed OpenSSH public key line {line!r}")
    try:
        return base64.b64decode(parts[1], validate=True)
    except binascii.Error as e:
        raise EncodingError(f"OpenSSH key blob is not valid base64: {e}") from e


def md5_fingerprint(blob: bytes) -> str:
    """Legacy OpenSSH fingerprint: MD5 of the blob as colon separated hex."""
    digest = hashes.Hash(hashes.MD5())
    digest.update(blob)
    return ":".join(f"{octet:02x}" for octet in digest.finalize())


def ssh_public_key(line: str) -> SSHPublicKey:
    """Pair an authorized_keys line with its MD5 fingerprint."""
    return SSHPublicKey(line=line, fingerprint_md5=md5_fingerprint(ssh_wire_blob(line)))

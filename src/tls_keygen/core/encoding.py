"""Private key encoding and public key derivation."""

import logging
from typing import Optional

from .errors import EncodingError
from .keys import KeyPair
from .models import SSHPublicKey
from .pem import pem_encode
from .ssh import ssh_public_key

log = logging.getLogger(__name__)

PUBLIC_KEY_PEM_LABEL = "PUBLIC KEY"


def encode_private_key(pair: KeyPair) -> str:
    """Serialize the private key into its algorithm specific PEM document.

    RSA keys become PKCS#1 "RSA PRIVATE KEY", ECDSA keys SEC1
    "EC PRIVATE KEY" and Ed25519 keys the raw seed under
    "ED25519 PRIVATE KEY".

    Raises:
        EncodingError: If the key cannot be serialized
    """
    try:
        body = pair.private_body()
    except (ValueError, TypeError) as e:
        raise EncodingError(f"error encoding key to PEM: {e}") from e
    return pem_encode(pair.pem_label, body)


def derive_public_key(pair: KeyPair) -> tuple[str, Optional[SSHPublicKey]]:
    """Derive the public key outputs of a key pair.

    Returns:
        Tuple of (PKIX public key PEM, SSH public key or None). The SSH
        key is None for curves without an OpenSSH key type.

    Raises:
        EncodingError: If the public key cannot be serialized
    """
    try:
        public_pem = pem_encode(PUBLIC_KEY_PEM_LABEL, pair.public_der())
        line = pair.openssh_line()
    except (ValueError, TypeError) as e:
        raise EncodingError(f"error encoding public key: {e}") from e

    if line is None:
        log.debug("%s key has no OpenSSH encoding", pair.algorithm.value)
        return public_pem, None

    ssh = ssh_public_key(line)
    log.debug("derived %s public key %s", line.split()[0], ssh.fingerprint_md5)
    return public_pem, ssh

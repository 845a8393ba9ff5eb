"""Generate a key pair and derive all of its encoded outputs."""

import logging
from typing import Optional

from ..core.encoding import derive_public_key, encode_private_key
from ..core.keys import generate_keypair
from ..core.models import Algorithm, ECDSACurve, EncodedKeyMaterial, KeyRequest

log = logging.getLogger(__name__)


class KeyGenerator:
    """Produces brand-new key material for each request.

    Holds no state between calls, so a single instance may be shared by
    concurrent callers.
    """

    def generate(self, request: KeyRequest) -> EncodedKeyMaterial:
        """Generate a key pair and encode it.

        Args:
            request: Key request

        Returns:
            EncodedKeyMaterial with private PEM, public PEM and, where the
            key type has one, the OpenSSH line and MD5 fingerprint

        Raises:
            GenerationError: If the key pair cannot be generated
            EncodingError: If the key pair cannot be serialized
        """
        pair = generate_keypair(request)
        private_pem = encode_private_key(pair)
        public_pem, ssh = derive_public_key(pair)

        material = EncodedKeyMaterial(
            private_key_pem=private_pem, public_key_pem=public_pem, ssh=ssh
        )
        log.debug(
            "generated %s key (openssh=%s)",
            request.algorithm.value,
            "yes" if ssh else "no",
        )
        return material


def generate(
    algorithm: Algorithm | str,
    rsa_bits: Optional[int] = None,
    ecdsa_curve: Optional[ECDSACurve | str] = None,
) -> EncodedKeyMaterial:
    """Generate a new key from plain parameters.

    Args:
        algorithm: "RSA", "ECDSA" or "ED25519"
        rsa_bits: RSA modulus size (default 2048)
        ecdsa_curve: "P224", "P256", "P384" or "P521" (default P224)

    Raises:
        InvalidParameterError: Unknown algorithm or curve
        GenerationError: If the key pair cannot be generated
        EncodingError: If the key pair cannot be serialized
    """
    request = KeyRequest.from_params(
        algorithm=algorithm, rsa_bits=rsa_bits, ecdsa_curve=ecdsa_curve
    )
    return KeyGenerator().generate(request)

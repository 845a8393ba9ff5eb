"""Create/read/delete lifecycle for a generated private key."""

import logging
from typing import Optional

from cryptography.hazmat.primitives import hashes
from pydantic import BaseModel, Field

from ..core.errors import ResourceStateError
from ..core.models import EncodedKeyMaterial, KeyRequest
from ..generator import KeyGenerator

log = logging.getLogger(__name__)


def state_id(public_key_pem: str) -> str:
    """Resource id: hex SHA-1 of the public key PEM."""
    digest = hashes.Hash(hashes.SHA1())
    digest.update(public_key_pem.encode("utf-8"))
    return digest.finalize().hex()


class PrivateKeyState(BaseModel):
    """Stored state of a created private key resource."""

    id: str = Field(description="Hex SHA-1 of the public key PEM")
    request: KeyRequest = Field(description="Parameters the key was created with")
    material: EncodedKeyMaterial = Field(description="Generated outputs")

    model_config = {"frozen": True}

    def outputs(self) -> dict[str, str]:
        return self.material.to_outputs()


class PrivateKeyResource:
    """A key that is generated once on create and never regenerated in place.

    Every request attribute forces replacement: changing any of them means
    deleting this key and creating a new one.
    """

    def __init__(self, generator: Optional[KeyGenerator] = None):
        self.generator = generator or KeyGenerator()
        self._state: Optional[PrivateKeyState] = None

    @property
    def state(self) -> Optional[PrivateKeyState]:
        return self._state

    def create(self, request: KeyRequest) -> PrivateKeyState:
        """Generate the key and store its outputs.

        Raises:
            ResourceStateError: If the resource already holds a key
        """
        if self._state is not None:
            raise ResourceStateError(
                f"private key {self._state.id} already exists; delete it first"
            )

        material = self.generator.generate(request)
        self._state = PrivateKeyState(
            id=state_id(material.public_key_pem), request=request, material=material
        )
        log.debug("created private key %s", self._state.id)
        return self._state

    def read(self) -> Optional[PrivateKeyState]:
        """Return the stored state; nothing is refreshed or regenerated."""
        return self._state

    def delete(self) -> None:
        """Forget the key. There is no external resource to release."""
        if self._state is not None:
            log.debug("deleted private key %s", self._state.id)
        self._state = None

    def requires_replacement(self, request: KeyRequest) -> bool:
        """Whether applying ``request`` means creating a new key."""
        return self._state is None or self._state.request != request

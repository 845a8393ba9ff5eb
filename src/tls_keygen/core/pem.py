"""PEM armor for DER documents and raw key bodies."""

import base64
import binascii

from .errors import KeyParseError

_LINE_WIDTH = 64


def pem_encode(label: str, body: bytes) -> str:
    """Wrap binary key material in a PEM envelope.

    Args:
        label: Block type, e.g. "RSA PRIVATE KEY"
        body: DER bytes (or a raw seed) to armor

    Returns:
        PEM text with a 64-column base64 body and a trailing newline
    """
    b64 = base64.b64encode(body).decode("ascii")
    lines = [b64[i : i + _LINE_WIDTH] for i in range(0, len(b64), _LINE_WIDTH)]
    return "".join(
        [f"-----BEGIN {label}-----\n"]
        + [line + "\n" for line in lines]
        + [f"-----END {label}-----\n"]
    )


def pem_decode(pem: str, label: str) -> bytes:
    """Extract the body of the first PEM block, which must carry ``label``.

    Raises:
        KeyParseError: If the armor is missing, mislabelled or not base64
    """
    lines = [line.strip() for line in pem.strip().splitlines()]
    if len(lines) < 2 or not lines[0].startswith("-----BEGIN "):
        raise KeyParseError("no PEM block found")

    begin = f"-----BEGIN {label}-----"
    end = f"-----END {label}-----"
    if lines[0] != begin:
        raise KeyParseError(f"expected PEM block {label!r}, got {lines[0]!r}")

    try:
        end_index = lines.index(end)
    except ValueError:
        raise KeyParseError(f"PEM block {label!r} is not terminated")

    try:
        return base64.b64decode("".join(lines[1:end_index]), validate=True)
    except binascii.Error as e:
        raise KeyParseError(f"PEM body is not valid base64: {e}") from e

"""SSH private key handling."""

import base64
import hashlib
from typing import NamedTuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization


class KeyInfo(NamedTuple):
    """Public details of a private key."""

    key_type: str
    fingerprint: str


def normalize_private_key(private_key: str) -> str:
    """Normalize private key text for ``ssh-add``.

    Strips carriage returns and surrounding whitespace, then appends a
    single trailing newline (ssh-add rejects keys without one).

    Args:
        private_key: Raw key text.

    Returns:
        Normalized key text.
    """
    return private_key.replace("\r", "").strip() + "\n"


def fingerprint(public_key_line: str) -> str:
    """Compute the OpenSSH SHA256 fingerprint of a public key.

    Args:
        public_key_line: Public key in ``<type> <base64> [comment]`` form.

    Returns:
        Fingerprint like ``SHA256:...``.
    """
    blob = base64.b64decode(public_key_line.split()[1])
    digest = base64.b64encode(hashlib.sha256(blob).digest()).decode("ascii")
    return f"SHA256:{digest.rstrip('=')}"


def describe_private_key(private_key: str) -> KeyInfo | None:
    """Get the type and fingerprint of an unencrypted private key.

    Args:
        private_key: Normalized key text (OpenSSH or PEM).

    Returns:
        KeyInfo, or None if the key cannot be parsed locally (for example
        because it is passphrase protected).
    """
    data = private_key.encode("utf-8")
    try:
        if b"OPENSSH PRIVATE KEY" in data:
            key = serialization.load_ssh_private_key(data, password=None)
        else:
            key = serialization.load_pem_private_key(data, password=None)
        public_key_line = (
            key.public_key()
            .public_bytes(
                encoding=serialization.Encoding.OpenSSH,
                format=serialization.PublicFormat.OpenSSH,
            )
            .decode("ascii")
        )
    except (ValueError, TypeError, UnsupportedAlgorithm):
        return None

    return KeyInfo(
        key_type=public_key_line.split()[0],
        fingerprint=fingerprint(public_key_line),
    )

"""
PEM key and certificate loading.
"""

import base64

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from xml_encryption.exceptions import (
    InvalidCertificateError,
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
)

_CERTIFICATE_MARKER = b"-----BEGIN CERTIFICATE-----"


def _to_bytes(pem: str | bytes) -> bytes:
    return pem.encode("ascii") if isinstance(pem, str) else pem


def load_public_key(pem: str | bytes) -> rsa.RSAPublicKey:
    """
    Load an RSA public key.

    Accepts either a public key PEM or an X.509 certificate PEM, in which
    case the certificate's subject key is used.

    Raises:
        InvalidPublicKeyError: If the PEM cannot be parsed or is not RSA.
    """
    try:
        data = _to_bytes(pem)
        if _CERTIFICATE_MARKER in data:
            key = x509.load_pem_x509_certificate(data).public_key()
        else:
            key = serialization.load_pem_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        msg = f"Failed to load public key: {e}"
        raise InvalidPublicKeyError(msg) from e

    if not isinstance(key, rsa.RSAPublicKey):
        msg = f"Expected an RSA public key, got {type(key).__name__}"
        raise InvalidPublicKeyError(msg)
    return key


def load_private_key(pem: str | bytes, password: str | bytes | None = None) -> rsa.RSAPrivateKey:
    """
    Load an RSA private key, decrypting it with ``password`` when given.

    Raises:
        InvalidPrivateKeyError: If the PEM cannot be parsed or is not RSA.
    """
    try:
        secret = _to_bytes(password) if password is not None else None
        key = serialization.load_pem_private_key(_to_bytes(pem), password=secret)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        # Message of the underlying error is not forwarded, it may echo password state
        msg = "Failed to load private key"
        raise InvalidPrivateKeyError(msg) from e

    if not isinstance(key, rsa.RSAPrivateKey):
        msg = f"Expected an RSA private key, got {type(key).__name__}"
        raise InvalidPrivateKeyError(msg)
    return key


def pem_to_certificate(pem: str | bytes) -> str:
    """
    Convert a certificate PEM into the bare base64 body used in X509Certificate.

    The certificate is parsed and its DER encoding re-encoded on a single line,
    so header, footer and line breaks never reach the envelope.

    Raises:
        InvalidCertificateError: If the PEM is not an X.509 certificate.
    """
    try:
        certificate = x509.load_pem_x509_certificate(_to_bytes(pem))
    except (ValueError, TypeError) as e:
        msg = f"Failed to load certificate: {e}"
        raise InvalidCertificateError(msg) from e

    der = certificate.public_bytes(serialization.Encoding.DER)
    return base64.b64encode(der).decode("ascii")

import base64

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from xml_encryption.crypto.pem import load_private_key, load_public_key, pem_to_certificate
from xml_encryption.exceptions import (
    InvalidCertificateError,
    InvalidKeyMaterialError,
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
)


def test_load_public_key_returns_rsa_key(public_pem: str, rsa_key: rsa.RSAPrivateKey) -> None:
    key = load_public_key(public_pem)

    assert key.public_numbers() == rsa_key.public_key().public_numbers()


def test_load_public_key_accepts_bytes(public_pem: str) -> None:
    assert isinstance(load_public_key(public_pem.encode("ascii")), rsa.RSAPublicKey)


def test_load_public_key_uses_certificate_subject_key(
    certificate_pem: str, rsa_key: rsa.RSAPrivateKey
) -> None:
    key = load_public_key(certificate_pem)

    assert key.public_numbers() == rsa_key.public_key().public_numbers()


def test_load_public_key_raises_on_garbage() -> None:
    with pytest.raises(InvalidPublicKeyError, match="Failed to load public key"):
        load_public_key("not a key")


def test_load_public_key_raises_on_non_rsa_key() -> None:
    ec_pem = (
        ec.generate_private_key(ec.SECP256R1())
        .public_key()
        .public_bytes(serialization.Encoding.PEM, serialization.PublicFormat.SubjectPublicKeyInfo)
    )

    with pytest.raises(InvalidPublicKeyError, match="Expected an RSA public key"):
        load_public_key(ec_pem)


def test_load_private_key_returns_rsa_key(private_pem: str) -> None:
    assert isinstance(load_private_key(private_pem), rsa.RSAPrivateKey)


def test_load_private_key_with_password(rsa_key: rsa.RSAPrivateKey) -> None:
    encrypted_pem = rsa_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.BestAvailableEncryption(b"hunter2"),
    )

    key = load_private_key(encrypted_pem, "hunter2")

    assert key.private_numbers() == rsa_key.private_numbers()


def test_load_private_key_raises_on_wrong_password(rsa_key: rsa.RSAPrivateKey) -> None:
    encrypted_pem = rsa_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.BestAvailableEncryption(b"hunter2"),
    )

    with pytest.raises(InvalidPrivateKeyError, match="Failed to load private key"):
        load_private_key(encrypted_pem, "wrong")


def test_load_private_key_raises_on_public_key(public_pem: str) -> None:
    with pytest.raises(InvalidKeyMaterialError):
        load_private_key(public_pem)


def test_pem_to_certificate_strips_armor_and_line_breaks(
    certificate_pem: str, certificate: x509.Certificate
) -> None:
    result = pem_to_certificate(certificate_pem)

    assert "-----" not in result
    assert "\n" not in result
    assert base64.b64decode(result) == certificate.public_bytes(serialization.Encoding.DER)


def test_pem_to_certificate_matches_pem_body(certificate_pem: str) -> None:
    body = "".join(line for line in certificate_pem.splitlines() if not line.startswith("-----"))

    assert pem_to_certificate(certificate_pem) == body


def test_pem_to_certificate_raises_on_public_key(public_pem: str) -> None:
    with pytest.raises(InvalidCertificateError, match="Failed to load certificate"):
        pem_to_certificate(public_pem)

"""
XML encryption exception hierarchy.

All exceptions inherit from XmlEncryptionError for easy catching.
"""

from typing import Any


class XmlEncryptionError(Exception):
    """Base exception for all xml_encryption errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class ConfigurationError(XmlEncryptionError):
    """Configuration is invalid."""


class MissingConfigurationError(ConfigurationError):
    """A required option was not provided."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"Missing required option: {field}", field=field)
        self.field = field


class UnsupportedAlgorithmError(XmlEncryptionError):
    """Algorithm URI is not registered for the requested operation."""

    def __init__(self, message: str, *, algorithm: str | None, kind: str) -> None:
        super().__init__(message, algorithm=algorithm, kind=kind)
        self.algorithm = algorithm
        self.kind = kind


class MalformedEnvelopeError(XmlEncryptionError):
    """Expected XML structure or element is absent."""

    def __init__(self, message: str, *, element: str | None = None) -> None:
        super().__init__(message, element=element)
        self.element = element


class CryptoError(XmlEncryptionError):
    """Cryptographic operation failed."""


class InvalidKeyMaterialError(CryptoError):
    """PEM material is unparsable or of the wrong type."""


class InvalidPublicKeyError(InvalidKeyMaterialError):
    """Public key cannot be loaded."""


class InvalidPrivateKeyError(InvalidKeyMaterialError):
    """Private key cannot be loaded."""


class InvalidCertificateError(InvalidKeyMaterialError):
    """Certificate cannot be loaded."""


class KeyTooLargeError(CryptoError):
    """Content key does not fit the RSA modulus minus padding overhead."""

    def __init__(self, message: str, *, key_size: int, max_size: int) -> None:
        super().__init__(message, key_size=key_size, max_size=max_size)
        self.key_size = key_size
        self.max_size = max_size


class MalformedCiphertextError(CryptoError):
    """Ciphertext is too short or not valid base64."""


class DecryptionFailedError(CryptoError):
    """Decryption or key unwrap failed. Carries no detail about the failing check."""


class InvalidCipherValueError(MalformedEnvelopeError, MalformedCiphertextError):
    """CipherValue text is not valid base64."""

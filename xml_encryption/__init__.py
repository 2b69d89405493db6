"""
XML Encryption for Python.

Wraps content in a W3C XML-Enc EncryptedData envelope (AES-256-CBC content,
RSA-OAEP key transport) and decrypts such envelopes, including legacy
3DES-CBC / RSA-PKCS#1 v1.5 ones.

Example:
    ```python
    from xml_encryption import DecryptionConfig, EncryptionConfig, decrypt, encrypt

    xml = encrypt("secret", EncryptionConfig(...))
    text = decrypt(xml, DecryptionConfig(private_key=private_pem))
    ```
"""

from xml_encryption.client import (
    decrypt,
    decrypt_bytes,
    decrypt_key_info,
    encrypt,
    encrypt_key_info,
)
from xml_encryption.config import DecryptionConfig, EncryptionConfig, KeyInfoConfig
from xml_encryption.exceptions import (
    ConfigurationError,
    CryptoError,
    DecryptionFailedError,
    InvalidCertificateError,
    InvalidCipherValueError,
    InvalidKeyMaterialError,
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
    KeyTooLargeError,
    MalformedCiphertextError,
    MalformedEnvelopeError,
    MissingConfigurationError,
    UnsupportedAlgorithmError,
    XmlEncryptionError,
)
from xml_encryption.models.algorithms import ContentEncryptionAlgorithm, KeyWrapAlgorithm
from xml_encryption.services.encryption_service import EncryptionService

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "encrypt",
    "encrypt_key_info",
    "decrypt",
    "decrypt_bytes",
    "decrypt_key_info",
    "EncryptionService",
    # Configuration
    "EncryptionConfig",
    "KeyInfoConfig",
    "DecryptionConfig",
    # Algorithms
    "ContentEncryptionAlgorithm",
    "KeyWrapAlgorithm",
    # Exceptions
    "XmlEncryptionError",
    "ConfigurationError",
    "MissingConfigurationError",
    "UnsupportedAlgorithmError",
    "MalformedEnvelopeError",
    "CryptoError",
    "InvalidKeyMaterialError",
    "InvalidPublicKeyError",
    "InvalidPrivateKeyError",
    "InvalidCertificateError",
    "KeyTooLargeError",
    "MalformedCiphertextError",
    "InvalidCipherValueError",
    "DecryptionFailedError",
]

"""
XML encryption facade.

Module-level entry points backed by one shared, stateless EncryptionService.

Example:
    ```python
    from xml_encryption import DecryptionConfig, EncryptionConfig, decrypt, encrypt

    xml = encrypt(
        "secret",
        EncryptionConfig(
            public_key=public_pem,
            certificate=certificate_pem,
            key_wrap_algorithm="http://www.w3.org/2001/04/xmlenc#rsa-oaep-mgf1p",
            content_encryption_algorithm="http://www.w3.org/2001/04/xmlenc#aes256-cbc",
        ),
    )
    text = decrypt(xml, DecryptionConfig(private_key=private_pem))
    ```
"""

from xml_encryption.config import DecryptionConfig, EncryptionConfig, KeyInfoConfig
from xml_encryption.envelope.protocol import XmlNode
from xml_encryption.services.encryption_service import EncryptionService

_service = EncryptionService()


def encrypt(content: str | bytes, config: EncryptionConfig) -> str:
    """Encrypt content into an EncryptedData document."""
    return _service.encrypt(content, config)


def encrypt_key_info(content_key: bytes, config: KeyInfoConfig | EncryptionConfig) -> str:
    """Wrap a content key and render the KeyInfo fragment."""
    return _service.encrypt_key_info(content_key, config)


def decrypt(xml: str | bytes, config: DecryptionConfig) -> str:
    """Decrypt an EncryptedData document to text."""
    return _service.decrypt(xml, config)


def decrypt_bytes(xml: str | bytes, config: DecryptionConfig) -> bytes:
    """Decrypt an EncryptedData document to raw bytes."""
    return _service.decrypt_bytes(xml, config)


def decrypt_key_info(xml: str | bytes | XmlNode, config: DecryptionConfig) -> bytes:
    """Unwrap the content key carried in a document's KeyInfo."""
    return _service.decrypt_key_info(xml, config)

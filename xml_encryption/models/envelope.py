"""
Envelope domain models.
"""

from dataclasses import dataclass, field

from xml_encryption.models.algorithms import ContentEncryptionAlgorithm, KeyWrapAlgorithm


@dataclass(frozen=True, kw_only=True)
class ContentKey:
    """
    Symmetric key protecting EncryptedData content.

    Attributes:
        algorithm: The content encryption algorithm the key belongs to.
        key_data: The raw key bytes.
    """

    algorithm: ContentEncryptionAlgorithm
    key_data: bytes = field(repr=False)

    def __post_init__(self) -> None:
        """Validate key size matches algorithm."""
        expected = self.algorithm.key_size
        if len(self.key_data) == expected:
            return
        msg = f"Key size mismatch: {self.algorithm.name} expects {expected} bytes, got {len(self.key_data)}"
        raise ValueError(msg)

    @property
    def iv_size(self) -> int:
        return self.algorithm.iv_size


@dataclass(frozen=True, kw_only=True)
class EncryptedKey:
    """
    Wrapped content key extracted from an EncryptedKey element.

    Attributes:
        algorithm: Key transport algorithm from EncryptedKey/EncryptionMethod.
        cipher_value: RSA ciphertext of the content key.
    """

    algorithm: KeyWrapAlgorithm
    cipher_value: bytes = field(repr=False)


@dataclass(frozen=True, kw_only=True)
class EncryptedDataParts:
    """
    Everything needed to decrypt an EncryptedData element.

    Attributes:
        content_algorithm: Algorithm from EncryptedData/EncryptionMethod.
        encrypted_key: The wrapped content key.
        cipher_value: IV followed by the content ciphertext.
    """

    content_algorithm: ContentEncryptionAlgorithm
    encrypted_key: EncryptedKey
    cipher_value: bytes = field(repr=False)

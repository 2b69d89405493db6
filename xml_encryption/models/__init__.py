"""
Domain models for XML encryption.

These are immutable (frozen) dataclasses and enums representing the core domain concepts.
"""

from xml_encryption.models.algorithms import (
    XMLDSIG_NS,
    XMLENC_NS,
    ContentEncryptionAlgorithm,
    KeyWrapAlgorithm,
    PaddingPolicy,
)
from xml_encryption.models.envelope import ContentKey, EncryptedDataParts, EncryptedKey

__all__ = [
    # Algorithms
    "ContentEncryptionAlgorithm",
    "KeyWrapAlgorithm",
    "PaddingPolicy",
    "XMLENC_NS",
    "XMLDSIG_NS",
    # Envelope
    "ContentKey",
    "EncryptedKey",
    "EncryptedDataParts",
]

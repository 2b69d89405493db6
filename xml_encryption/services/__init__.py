"""
Business logic services for XML encryption.
"""

from xml_encryption.services.encryption_service import EncryptionService

__all__ = [
    "EncryptionService",
]

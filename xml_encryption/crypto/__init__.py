"""
Cryptographic operations for XML encryption.

This module provides:
- Algorithm URI resolution (content encryption and key transport)
- CBC content encryption with IV prefixing
- RSA wrapping of the content key
- PEM key and certificate loading
"""

from xml_encryption.crypto.content_cipher import (
    decrypt_content,
    encrypt_content,
    generate_content_key,
    strip_legacy_padding,
)
from xml_encryption.crypto.key_wrap import unwrap_content_key, wrap_content_key
from xml_encryption.crypto.pem import load_private_key, load_public_key, pem_to_certificate
from xml_encryption.crypto.registry import resolve_content_algorithm, resolve_key_wrap_algorithm

__all__ = [
    "resolve_content_algorithm",
    "resolve_key_wrap_algorithm",
    "generate_content_key",
    "encrypt_content",
    "decrypt_content",
    "strip_legacy_padding",
    "wrap_content_key",
    "unwrap_content_key",
    "load_public_key",
    "load_private_key",
    "pem_to_certificate",
]

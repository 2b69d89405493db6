"""
XML envelope handling.

This module provides:
- Collaborator protocols for XML parsing and template rendering
- Namespace-agnostic element lookup
- EncryptedData / EncryptedKey building and parsing
"""

from xml_encryption.envelope.builder import EnvelopeBuilder
from xml_encryption.envelope.etree_backend import EtreeBackend, EtreeNode
from xml_encryption.envelope.lookup import find_all_by_local_name, find_by_local_name
from xml_encryption.envelope.parser import (
    EnvelopeParser,
    locate_cipher_value,
    locate_encryption_method,
    locate_key_info,
)
from xml_encryption.envelope.protocol import TemplateRenderer, XmlBackend, XmlNode
from xml_encryption.envelope.renderer import JinjaRenderer

__all__ = [
    "XmlNode",
    "XmlBackend",
    "TemplateRenderer",
    "EtreeBackend",
    "EtreeNode",
    "JinjaRenderer",
    "EnvelopeBuilder",
    "EnvelopeParser",
    "find_by_local_name",
    "find_all_by_local_name",
    "locate_encryption_method",
    "locate_cipher_value",
    "locate_key_info",
]

"""
EncryptedData / EncryptedKey extraction.

All lookups match by local name so any namespace prefix is accepted.
"""

import base64
import binascii

from xml_encryption.crypto.registry import resolve_content_algorithm, resolve_key_wrap_algorithm
from xml_encryption.envelope.etree_backend import EtreeBackend
from xml_encryption.envelope.lookup import find_by_local_name
from xml_encryption.envelope.protocol import XmlBackend, XmlNode
from xml_encryption.exceptions import InvalidCipherValueError, MalformedEnvelopeError
from xml_encryption.models.algorithms import XMLDSIG_NS
from xml_encryption.models.envelope import EncryptedDataParts, EncryptedKey

_ENCRYPTED_DATA = "EncryptedData"
_KEY_INFO = "KeyInfo"


def locate_encryption_method(scope: XmlNode, path: str = "EncryptionMethod") -> str:
    """
    Get the Algorithm attribute of the EncryptionMethod at ``path``.

    Raises:
        MalformedEnvelopeError: If the element or its Algorithm attribute is absent.
    """
    method = find_by_local_name(scope, path)
    if method is None:
        msg = "EncryptionMethod element not found"
        raise MalformedEnvelopeError(msg, element=path)

    algorithm = method.get("Algorithm")
    if not algorithm:
        msg = "EncryptionMethod has no Algorithm attribute"
        raise MalformedEnvelopeError(msg, element=path)
    return algorithm


def locate_cipher_value(scope: XmlNode, path: str = "CipherData/CipherValue") -> bytes:
    """
    Get the base64-decoded text of the CipherValue at ``path``.

    Whitespace inside the value is ignored.

    Raises:
        MalformedEnvelopeError: If the element is absent.
        InvalidCipherValueError: If its text is not valid base64.
    """
    cipher_value = find_by_local_name(scope, path)
    if cipher_value is None:
        msg = "CipherValue element not found"
        raise MalformedEnvelopeError(msg, element=path)

    text = "".join(cipher_value.text.split())
    if not text:
        msg = "CipherValue is empty"
        raise InvalidCipherValueError(msg, element=path)
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error:
        msg = "CipherValue is not valid base64"
        raise InvalidCipherValueError(msg, element=path) from None


def locate_key_info(document: XmlNode) -> XmlNode:
    """
    Find the document-level KeyInfo element in the XML-DSig namespace.

    Raises:
        MalformedEnvelopeError: If no such element exists.
    """
    key_info = find_by_local_name(document, _KEY_INFO, namespace=XMLDSIG_NS)
    if key_info is None:
        msg = "KeyInfo element not found"
        raise MalformedEnvelopeError(msg, element=_KEY_INFO)
    return key_info


class EnvelopeParser:
    """
    Extracts algorithms and ciphertext from an EncryptedData document.

    Algorithm URIs are resolved while parsing, so an unsupported algorithm is
    reported before any key material is used.
    """

    def __init__(self, xml_backend: XmlBackend | None = None) -> None:
        """
        Args:
            xml_backend: XML parser. Defaults to EtreeBackend.
        """
        self._xml = xml_backend or EtreeBackend()

    def parse_document(self, xml: str | bytes) -> XmlNode:
        """Parse serialized XML into its document element."""
        return self._xml.parse(xml)

    @staticmethod
    def parse_encrypted_key(scope: XmlNode) -> EncryptedKey:
        """
        Extract the wrapped content key below the first XML-DSig KeyInfo in scope.

        Raises:
            MalformedEnvelopeError: If KeyInfo, EncryptionMethod or CipherValue is missing.
            UnsupportedAlgorithmError: If the key transport algorithm is not registered.
        """
        key_info = locate_key_info(scope)
        uri = locate_encryption_method(key_info, "KeyInfo/EncryptedKey/EncryptionMethod")
        algorithm = resolve_key_wrap_algorithm(uri)
        cipher_value = locate_cipher_value(key_info, "KeyInfo//CipherValue")
        return EncryptedKey(algorithm=algorithm, cipher_value=cipher_value)

    def parse_encrypted_data(self, document: XmlNode) -> EncryptedDataParts:
        """
        Extract everything needed to decrypt the first EncryptedData element.

        Raises:
            MalformedEnvelopeError: If a required element is missing.
            UnsupportedAlgorithmError: If an algorithm URI is not registered.
        """
        encrypted_data = find_by_local_name(document, _ENCRYPTED_DATA)
        if encrypted_data is None:
            msg = "EncryptedData element not found"
            raise MalformedEnvelopeError(msg, element=_ENCRYPTED_DATA)

        content_uri = locate_encryption_method(encrypted_data, "EncryptedData/EncryptionMethod")
        content_algorithm = resolve_content_algorithm(content_uri)
        encrypted_key = self.parse_encrypted_key(encrypted_data)
        cipher_value = locate_cipher_value(encrypted_data, "EncryptedData/CipherData/CipherValue")

        return EncryptedDataParts(
            content_algorithm=content_algorithm,
            encrypted_key=encrypted_key,
            cipher_value=cipher_value,
        )

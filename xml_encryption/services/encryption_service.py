"""
XML encryption service.

Runs the encrypt and decrypt pipelines. Each step either returns its result
to the next one or raises, so no step runs after a failed predecessor and no
partial envelope or plaintext is ever returned.
"""

import base64

import structlog
from cryptography.hazmat.primitives.asymmetric import rsa

from xml_encryption.config import DecryptionConfig, EncryptionConfig, KeyInfoConfig
from xml_encryption.crypto.content_cipher import (
    decrypt_content,
    encrypt_content,
    generate_content_key,
)
from xml_encryption.crypto.key_wrap import unwrap_content_key, wrap_content_key
from xml_encryption.crypto.pem import load_private_key, load_public_key, pem_to_certificate
from xml_encryption.crypto.registry import resolve_content_algorithm, resolve_key_wrap_algorithm
from xml_encryption.envelope.builder import EnvelopeBuilder
from xml_encryption.envelope.parser import EnvelopeParser
from xml_encryption.envelope.protocol import TemplateRenderer, XmlBackend, XmlNode
from xml_encryption.exceptions import (
    ConfigurationError,
    DecryptionFailedError,
    MissingConfigurationError,
)
from xml_encryption.models.algorithms import ContentEncryptionAlgorithm, KeyWrapAlgorithm
from xml_encryption.models.envelope import ContentKey

logger = structlog.get_logger(__name__)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class EncryptionService:
    """
    Produces and consumes XML-Enc EncryptedData envelopes.

    The service holds no per-call state, so one instance can serve any number
    of concurrent calls.
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        xml_backend: XmlBackend | None = None,
    ) -> None:
        """
        Args:
            renderer: Template renderer for envelope markup. Defaults to JinjaRenderer.
            xml_backend: XML parser for incoming envelopes. Defaults to EtreeBackend.
        """
        self._builder = EnvelopeBuilder(renderer)
        self._parser = EnvelopeParser(xml_backend)

    def encrypt(self, content: str | bytes, config: EncryptionConfig) -> str:
        """
        Encrypt content into an EncryptedData document.

        Args:
            content: Content to encrypt. Text is encoded with ``config.input_encoding``.
            config: Recipient key material and algorithm URIs.

        Returns:
            The EncryptedData document.

        Raises:
            MissingConfigurationError: If content or config is missing.
            ConfigurationError: If text content cannot be encoded with ``config.input_encoding``.
            UnsupportedAlgorithmError: If an algorithm is not allowed for new envelopes.
            InvalidKeyMaterialError: If the public key or certificate cannot be loaded.
            KeyTooLargeError: If the content key does not fit the RSA key.
        """
        if config is None:
            raise MissingConfigurationError("config", "Must provide options")
        if not content:
            raise MissingConfigurationError("content", "Must provide content to encrypt")

        content_algorithm = resolve_content_algorithm(
            config.content_encryption_algorithm, for_encryption=True
        )
        key_wrap_algorithm = resolve_key_wrap_algorithm(
            config.key_wrap_algorithm, for_encryption=True
        )
        plaintext = self._encode(content, config.input_encoding)

        public_key = load_public_key(config.public_key)
        certificate = pem_to_certificate(config.certificate)

        logger.debug(
            "Encrypting content",
            content_algorithm=str(content_algorithm),
            key_wrap_algorithm=str(key_wrap_algorithm),
            size=len(plaintext),
        )
        content_key = generate_content_key(content_algorithm)
        encrypted_content = encrypt_content(content_key, plaintext)
        key_info = self._render_key_info(
            content_key.key_data, public_key, certificate, key_wrap_algorithm
        )

        return self._builder.build_encrypted_data(
            _b64(encrypted_content), key_info, str(content_algorithm)
        )

    def encrypt_key_info(
        self, content_key: bytes, config: KeyInfoConfig | EncryptionConfig
    ) -> str:
        """
        Wrap a caller-held content key and render only the KeyInfo fragment.

        Args:
            content_key: Raw symmetric key bytes.
            config: Recipient key material and key transport algorithm.

        Returns:
            The KeyInfo fragment.
        """
        if config is None:
            raise MissingConfigurationError("config", "Must provide options")
        if isinstance(config, EncryptionConfig):
            config = KeyInfoConfig.from_encryption_config(config)

        key_wrap_algorithm = resolve_key_wrap_algorithm(
            config.key_wrap_algorithm, for_encryption=True
        )
        public_key = load_public_key(config.public_key)
        certificate = pem_to_certificate(config.certificate)
        return self._render_key_info(content_key, public_key, certificate, key_wrap_algorithm)

    def _render_key_info(
        self,
        content_key: bytes,
        public_key: rsa.RSAPublicKey,
        certificate: str,
        algorithm: KeyWrapAlgorithm,
    ) -> str:
        wrapped_key = wrap_content_key(content_key, public_key, algorithm)
        return self._builder.build_key_info(_b64(wrapped_key), certificate, str(algorithm))

    def decrypt(self, xml: str | bytes, config: DecryptionConfig) -> str:
        """
        Decrypt an EncryptedData document to text.

        Decrypted bytes are decoded with ``config.output_encoding``.

        Raises:
            DecryptionFailedError: If decryption fails or the result is not valid text.
        """
        plaintext = self.decrypt_bytes(xml, config)
        try:
            return plaintext.decode(config.output_encoding)
        except UnicodeDecodeError:
            msg = "Decrypted content is not valid text"
            raise DecryptionFailedError(msg, encoding=config.output_encoding) from None

    def decrypt_bytes(self, xml: str | bytes, config: DecryptionConfig) -> bytes:
        """
        Decrypt an EncryptedData document.

        Args:
            xml: The EncryptedData document, or a larger document containing it.
            config: Recipient private key.

        Returns:
            The decrypted content.

        Raises:
            MissingConfigurationError: If xml or config is missing.
            MalformedEnvelopeError: If the document lacks a required element.
            UnsupportedAlgorithmError: If an algorithm URI is not registered.
            InvalidKeyMaterialError: If the private key cannot be loaded.
            MalformedCiphertextError: If the content ciphertext is shorter than its IV.
            DecryptionFailedError: If unwrapping or decryption fails.
        """
        if config is None:
            raise MissingConfigurationError("config", "Must provide options")
        if not xml:
            raise MissingConfigurationError("xml", "Must provide XML to decrypt")

        document = self._parser.parse_document(xml)
        parts = self._parser.parse_encrypted_data(document)
        logger.debug(
            "Decrypting content",
            content_algorithm=str(parts.content_algorithm),
            key_wrap_algorithm=str(parts.encrypted_key.algorithm),
        )

        private_key = load_private_key(config.private_key, config.private_key_password)
        key_data = unwrap_content_key(
            parts.encrypted_key.cipher_value, private_key, parts.encrypted_key.algorithm
        )
        content_key = self._content_key(parts.content_algorithm, key_data)
        return decrypt_content(content_key, parts.cipher_value)

    def decrypt_key_info(self, xml: str | bytes | XmlNode, config: DecryptionConfig) -> bytes:
        """
        Unwrap the content key carried in a document's KeyInfo.

        Args:
            xml: Serialized document or an already parsed document element.
            config: Recipient private key.

        Returns:
            The raw content key.
        """
        if config is None:
            raise MissingConfigurationError("config", "Must provide options")
        if not xml:
            raise MissingConfigurationError("xml", "Must provide XML to decrypt")

        document = self._parser.parse_document(xml) if isinstance(xml, (str, bytes)) else xml
        encrypted_key = self._parser.parse_encrypted_key(document)

        private_key = load_private_key(config.private_key, config.private_key_password)
        return unwrap_content_key(encrypted_key.cipher_value, private_key, encrypted_key.algorithm)

    @staticmethod
    def _encode(content: str | bytes, encoding: str) -> bytes:
        if isinstance(content, bytes):
            return content
        try:
            return content.encode(encoding)
        except UnicodeEncodeError as e:
            msg = "Content cannot be represented in input_encoding"
            raise ConfigurationError(msg, encoding=encoding, position=e.start) from None

    @staticmethod
    def _content_key(algorithm: ContentEncryptionAlgorithm, key_data: bytes) -> ContentKey:
        # PKCS#1 v1.5 implicit rejection yields random bytes of arbitrary length
        try:
            return ContentKey(algorithm=algorithm, key_data=key_data)
        except ValueError:
            msg = "Failed to unwrap content key"
            raise DecryptionFailedError(msg) from None

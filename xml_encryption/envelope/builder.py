"""
EncryptedData / EncryptedKey markup assembly.

Pure string assembly: no cryptography happens here and caller-supplied
values are inserted as given.
"""

from markupsafe import Markup

from xml_encryption.envelope.protocol import TemplateRenderer
from xml_encryption.envelope.renderer import JinjaRenderer
from xml_encryption.models.algorithms import XMLDSIG_SHA1, XMLENC_ELEMENT_TYPE

KEY_INFO_TEMPLATE = "keyinfo"
ENCRYPTED_DATA_TEMPLATE = "encrypted_data"


class EnvelopeBuilder:
    """
    Renders the KeyInfo fragment and the EncryptedData document.

    Example:
        builder = EnvelopeBuilder()
        key_info = builder.build_key_info(wrapped_b64, certificate, key_wrap_uri)
        xml = builder.build_encrypted_data(content_b64, key_info, content_uri)
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        """
        Args:
            renderer: Template renderer. Defaults to JinjaRenderer.
        """
        self._renderer = renderer or JinjaRenderer()

    def build_key_info(self, encrypted_key: str, certificate: str, key_wrap_algorithm: str) -> str:
        """
        Render the KeyInfo/EncryptedKey fragment.

        Args:
            encrypted_key: Base64 of the wrapped content key.
            certificate: Bare base64 certificate body (no PEM armor or line breaks).
            key_wrap_algorithm: Key transport algorithm URI.

        Returns:
            The KeyInfo fragment.
        """
        return self._renderer.render(
            KEY_INFO_TEMPLATE,
            {
                "encrypted_key": encrypted_key,
                "certificate": certificate,
                "key_encryption_method": key_wrap_algorithm,
                "digest_method": XMLDSIG_SHA1,
            },
        )

    def build_encrypted_data(
        self, encrypted_content: str, key_info: str, content_algorithm: str
    ) -> str:
        """
        Render the EncryptedData document.

        Args:
            encrypted_content: Base64 of IV + content ciphertext.
            key_info: KeyInfo fragment from build_key_info.
            content_algorithm: Content encryption algorithm URI.

        Returns:
            The EncryptedData document.
        """
        return self._renderer.render(
            ENCRYPTED_DATA_TEMPLATE,
            {
                "encrypted_content": encrypted_content,
                "key_info": Markup(key_info),
                "content_encryption_method": content_algorithm,
                "element_type": XMLENC_ELEMENT_TYPE,
            },
        )

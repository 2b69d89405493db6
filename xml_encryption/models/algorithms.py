"""
XML Encryption algorithm identifiers.

Each member is keyed by its W3C algorithm URI and carries its parameters as data.
"""

from enum import Enum, StrEnum

XMLENC_NS = "http://www.w3.org/2001/04/xmlenc#"
XMLDSIG_NS = "http://www.w3.org/2000/09/xmldsig#"
XMLDSIG_SHA1 = "http://www.w3.org/2000/09/xmldsig#sha1"
XMLENC_ELEMENT_TYPE = "http://www.w3.org/2001/04/xmlenc#Element"


class PaddingPolicy(Enum):
    """How block padding is removed after CBC decryption."""

    # PKCS#7 unpadding, rejects invalid padding
    PKCS7 = "pkcs7"
    # Trailing pad-length byte honoured only when in [1, block_size]
    LEGACY_PKCS5 = "legacy-pkcs5"


class ContentEncryptionAlgorithm(StrEnum):
    """Block ciphers used to encrypt EncryptedData content."""

    AES_256_CBC = "http://www.w3.org/2001/04/xmlenc#aes256-cbc"
    TRIPLE_DES_CBC = "http://www.w3.org/2001/04/xmlenc#tripledes-cbc"

    @property
    def key_size(self) -> int:
        """Get key size in bytes for this algorithm."""
        match self:
            case ContentEncryptionAlgorithm.AES_256_CBC:
                return 32
            case ContentEncryptionAlgorithm.TRIPLE_DES_CBC:
                return 24

    @property
    def iv_size(self) -> int:
        """IV length in bytes, equal to the cipher block size."""
        match self:
            case ContentEncryptionAlgorithm.AES_256_CBC:
                return 16
            case ContentEncryptionAlgorithm.TRIPLE_DES_CBC:
                return 8

    @property
    def block_size(self) -> int:
        return self.iv_size

    @property
    def padding(self) -> PaddingPolicy:
        match self:
            case ContentEncryptionAlgorithm.AES_256_CBC:
                return PaddingPolicy.PKCS7
            case ContentEncryptionAlgorithm.TRIPLE_DES_CBC:
                return PaddingPolicy.LEGACY_PKCS5

    @property
    def allows_encryption(self) -> bool:
        """Whether new envelopes may be produced with this algorithm."""
        return self is ContentEncryptionAlgorithm.AES_256_CBC


class KeyWrapAlgorithm(StrEnum):
    """RSA key transport algorithms for EncryptedKey."""

    RSA_OAEP_MGF1P = "http://www.w3.org/2001/04/xmlenc#rsa-oaep-mgf1p"
    RSA_1_5 = "http://www.w3.org/2001/04/xmlenc#rsa-1_5"

    @property
    def allows_encryption(self) -> bool:
        """Only OAEP is used for new envelopes; PKCS#1 v1.5 is decrypt-only."""
        return self is KeyWrapAlgorithm.RSA_OAEP_MGF1P

"""
RSA key transport for the content key (EncryptedKey).

The content key is always shorter than the modulus, so it is wrapped in a
single RSA operation.
"""

import structlog
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from xml_encryption.exceptions import DecryptionFailedError, KeyTooLargeError
from xml_encryption.models.algorithms import KeyWrapAlgorithm

logger = structlog.get_logger(__name__)

# OAEP overhead is 2 * hash length + 2, PKCS#1 v1.5 overhead is 11
_SHA1_DIGEST_SIZE = 20
_PKCS1V15_OVERHEAD = 11


def _padding_for(algorithm: KeyWrapAlgorithm) -> padding.AsymmetricPadding:
    match algorithm:
        case KeyWrapAlgorithm.RSA_OAEP_MGF1P:
            return padding.OAEP(
                mgf=padding.MGF1(algorithm=hashes.SHA1()),
                algorithm=hashes.SHA1(),
                label=None,
            )
        case KeyWrapAlgorithm.RSA_1_5:
            return padding.PKCS1v15()


def max_wrappable_size(public_key: rsa.RSAPublicKey, algorithm: KeyWrapAlgorithm) -> int:
    """Largest content key, in bytes, that fits a single RSA block."""
    modulus_size = (public_key.key_size + 7) // 8
    match algorithm:
        case KeyWrapAlgorithm.RSA_OAEP_MGF1P:
            return modulus_size - 2 * _SHA1_DIGEST_SIZE - 2
        case KeyWrapAlgorithm.RSA_1_5:
            return modulus_size - _PKCS1V15_OVERHEAD


def wrap_content_key(
    content_key: bytes,
    public_key: rsa.RSAPublicKey,
    algorithm: KeyWrapAlgorithm = KeyWrapAlgorithm.RSA_OAEP_MGF1P,
) -> bytes:
    """
    Encrypt the content key with the recipient's RSA public key.

    Args:
        content_key: Raw symmetric key bytes.
        public_key: Recipient public key.
        algorithm: Key transport algorithm.

    Returns:
        RSA ciphertext of the content key.

    Raises:
        KeyTooLargeError: If the key does not fit the modulus minus padding overhead.
    """
    max_size = max_wrappable_size(public_key, algorithm)
    if len(content_key) > max_size:
        msg = f"Content key too large for RSA key: {len(content_key)} > {max_size}"
        raise KeyTooLargeError(msg, key_size=len(content_key), max_size=max_size)

    logger.debug("Wrapping content key", algorithm=str(algorithm), rsa_bits=public_key.key_size)
    return public_key.encrypt(content_key, _padding_for(algorithm))


def unwrap_content_key(
    wrapped_key: bytes,
    private_key: rsa.RSAPrivateKey,
    algorithm: KeyWrapAlgorithm,
) -> bytes:
    """
    Decrypt a wrapped content key with the RSA private key.

    Args:
        wrapped_key: RSA ciphertext from EncryptedKey/CipherData/CipherValue.
        private_key: Recipient private key.
        algorithm: Padding scheme declared in EncryptedKey/EncryptionMethod.

    Returns:
        Raw symmetric key bytes.

    Raises:
        DecryptionFailedError: On any unwrap failure. The cause is never exposed.
    """
    logger.debug("Unwrapping content key", algorithm=str(algorithm), rsa_bits=private_key.key_size)
    try:
        return private_key.decrypt(wrapped_key, _padding_for(algorithm))
    except ValueError:
        msg = "Failed to unwrap content key"
        raise DecryptionFailedError(msg) from None

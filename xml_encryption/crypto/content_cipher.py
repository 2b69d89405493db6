"""
CBC content encryption for EncryptedData.

Wire format of CipherValue (before base64): [IV (block size)] + [ciphertext].
"""

import secrets

import structlog
from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, CipherAlgorithm, algorithms, modes

from xml_encryption.exceptions import DecryptionFailedError, MalformedCiphertextError
from xml_encryption.models.algorithms import ContentEncryptionAlgorithm, PaddingPolicy
from xml_encryption.models.envelope import ContentKey

logger = structlog.get_logger(__name__)


def generate_content_key(algorithm: ContentEncryptionAlgorithm) -> ContentKey:
    """
    Generate a fresh random content key.

    Failures of the system random source propagate to the caller.
    """
    return ContentKey(algorithm=algorithm, key_data=secrets.token_bytes(algorithm.key_size))


def _block_cipher(content_key: ContentKey) -> CipherAlgorithm:
    match content_key.algorithm:
        case ContentEncryptionAlgorithm.AES_256_CBC:
            return algorithms.AES(content_key.key_data)
        case ContentEncryptionAlgorithm.TRIPLE_DES_CBC:
            return TripleDES(content_key.key_data)


def encrypt_content(content_key: ContentKey, plaintext: bytes) -> bytes:
    """
    Encrypt content with a fresh random IV and PKCS#7 padding.

    Args:
        content_key: Key and algorithm to use.
        plaintext: Content bytes, already encoded by the caller.

    Returns:
        IV followed by the ciphertext.
    """
    algorithm = content_key.algorithm
    iv = secrets.token_bytes(algorithm.iv_size)

    padder = padding.PKCS7(algorithm.block_size * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()

    encryptor = Cipher(_block_cipher(content_key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    logger.debug("Content encrypted", algorithm=str(algorithm), size=len(plaintext))
    return iv + ciphertext


def decrypt_content(content_key: ContentKey, iv_ciphertext: bytes) -> bytes:
    """
    Decrypt IV-prefixed CBC content.

    Args:
        content_key: Key and algorithm declared by the envelope.
        iv_ciphertext: Decoded CipherValue.

    Returns:
        Decrypted content bytes with padding removed per the algorithm's policy.

    Raises:
        MalformedCiphertextError: If the input is shorter than the IV.
        DecryptionFailedError: On any cipher or padding failure.
    """
    algorithm = content_key.algorithm
    iv_size = algorithm.iv_size
    if len(iv_ciphertext) < iv_size:
        msg = f"Ciphertext too short: {len(iv_ciphertext)} < {iv_size}"
        raise MalformedCiphertextError(msg)

    iv = iv_ciphertext[:iv_size]
    ciphertext = iv_ciphertext[iv_size:]

    try:
        decryptor = Cipher(_block_cipher(content_key), modes.CBC(iv)).decryptor()
        decrypted = decryptor.update(ciphertext) + decryptor.finalize()
        if algorithm.padding is PaddingPolicy.PKCS7:
            unpadder = padding.PKCS7(algorithm.block_size * 8).unpadder()
            return unpadder.update(decrypted) + unpadder.finalize()
    except ValueError:
        msg = "Failed to decrypt content"
        raise DecryptionFailedError(msg) from None

    return strip_legacy_padding(decrypted, algorithm.block_size)


def strip_legacy_padding(data: bytes, block_size: int) -> bytes:
    """
    Remove PKCS#5 padding the way legacy XML-Enc producers expect.

    The last byte is read as the pad length. Only a length in [1, block_size]
    is stripped; any other value leaves the buffer untouched. The pad bytes
    themselves are not verified, so this is not authoritative padding validation.
    """
    if not data:
        return data

    pad_size = data[-1]
    if 0 < pad_size <= block_size:
        return data[:-pad_size]

    logger.warning("Pad length out of range, keeping full buffer", pad_size=pad_size)
    return data

"""
Algorithm URI resolution.

The registry is closed: a URI either maps to a registered member or raises.
No default algorithm is ever substituted.
"""

from xml_encryption.exceptions import UnsupportedAlgorithmError
from xml_encryption.models.algorithms import ContentEncryptionAlgorithm, KeyWrapAlgorithm

_CONTENT = "content-encryption"
_KEY_WRAP = "key-wrap"


def resolve_content_algorithm(
    uri: str | None, *, for_encryption: bool = False
) -> ContentEncryptionAlgorithm:
    """
    Resolve a content encryption algorithm URI.

    Args:
        uri: Algorithm URI from configuration or EncryptionMethod/@Algorithm.
        for_encryption: Also require the algorithm to be allowed for new envelopes.

    Returns:
        The registered algorithm.

    Raises:
        UnsupportedAlgorithmError: If the URI is unknown or not allowed.
    """
    try:
        algorithm = ContentEncryptionAlgorithm(uri)
    except ValueError:
        msg = f"Encryption algorithm not supported: {uri}"
        raise UnsupportedAlgorithmError(msg, algorithm=uri, kind=_CONTENT) from None

    if for_encryption and not algorithm.allows_encryption:
        msg = f"Encryption algorithm not supported for new envelopes: {uri}"
        raise UnsupportedAlgorithmError(msg, algorithm=uri, kind=_CONTENT)
    return algorithm


def resolve_key_wrap_algorithm(uri: str | None, *, for_encryption: bool = False) -> KeyWrapAlgorithm:
    """
    Resolve a key transport algorithm URI.

    Args:
        uri: Algorithm URI from configuration or EncryptedKey/EncryptionMethod/@Algorithm.
        for_encryption: Also require the algorithm to be allowed for new envelopes.

    Returns:
        The registered algorithm.

    Raises:
        UnsupportedAlgorithmError: If the URI is unknown or not allowed.
    """
    try:
        algorithm = KeyWrapAlgorithm(uri)
    except ValueError:
        msg = f"Key encryption algorithm not supported: {uri}"
        raise UnsupportedAlgorithmError(msg, algorithm=uri, kind=_KEY_WRAP) from None

    if for_encryption and not algorithm.allows_encryption:
        msg = f"Key encryption algorithm not supported for new envelopes: {uri}"
        raise UnsupportedAlgorithmError(msg, algorithm=uri, kind=_KEY_WRAP)
    return algorithm

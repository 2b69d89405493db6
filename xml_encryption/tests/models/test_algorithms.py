from xml_encryption.models.algorithms import (
    ContentEncryptionAlgorithm,
    KeyWrapAlgorithm,
    PaddingPolicy,
)


def test_content_algorithm_uris_match_xmlenc() -> None:
    assert ContentEncryptionAlgorithm.AES_256_CBC == "http://www.w3.org/2001/04/xmlenc#aes256-cbc"
    assert (
        ContentEncryptionAlgorithm.TRIPLE_DES_CBC
        == "http://www.w3.org/2001/04/xmlenc#tripledes-cbc"
    )


def test_key_wrap_algorithm_uris_match_xmlenc() -> None:
    assert KeyWrapAlgorithm.RSA_OAEP_MGF1P == "http://www.w3.org/2001/04/xmlenc#rsa-oaep-mgf1p"
    assert KeyWrapAlgorithm.RSA_1_5 == "http://www.w3.org/2001/04/xmlenc#rsa-1_5"


def test_content_algorithm_returns_correct_sizes() -> None:
    assert ContentEncryptionAlgorithm.AES_256_CBC.key_size == 32
    assert ContentEncryptionAlgorithm.AES_256_CBC.iv_size == 16
    assert ContentEncryptionAlgorithm.AES_256_CBC.block_size == 16
    assert ContentEncryptionAlgorithm.TRIPLE_DES_CBC.key_size == 24
    assert ContentEncryptionAlgorithm.TRIPLE_DES_CBC.iv_size == 8
    assert ContentEncryptionAlgorithm.TRIPLE_DES_CBC.block_size == 8


def test_content_algorithm_returns_padding_policy() -> None:
    assert ContentEncryptionAlgorithm.AES_256_CBC.padding is PaddingPolicy.PKCS7
    assert ContentEncryptionAlgorithm.TRIPLE_DES_CBC.padding is PaddingPolicy.LEGACY_PKCS5


def test_only_aes_and_oaep_allow_encryption() -> None:
    assert ContentEncryptionAlgorithm.AES_256_CBC.allows_encryption
    assert not ContentEncryptionAlgorithm.TRIPLE_DES_CBC.allows_encryption
    assert KeyWrapAlgorithm.RSA_OAEP_MGF1P.allows_encryption
    assert not KeyWrapAlgorithm.RSA_1_5.allows_encryption

from xml_encryption.exceptions import (
    CryptoError,
    DecryptionFailedError,
    InvalidPublicKeyError,
    KeyTooLargeError,
    MissingConfigurationError,
    UnsupportedAlgorithmError,
    XmlEncryptionError,
)


def test_xml_encryption_error_str_without_context() -> None:
    error = XmlEncryptionError("Something failed")

    assert str(error) == "Something failed"


def test_xml_encryption_error_str_with_context() -> None:
    error = XmlEncryptionError("Failed", element="CipherValue", attempt=3)

    assert "Failed" in str(error)
    assert "element='CipherValue'" in str(error)
    assert "attempt=3" in str(error)


def test_missing_configuration_error_names_field() -> None:
    error = MissingConfigurationError("public_key")

    assert error.field == "public_key"
    assert str(error) == "Missing required option: public_key (field='public_key')"


def test_unsupported_algorithm_error_carries_uri() -> None:
    error = UnsupportedAlgorithmError("nope", algorithm="urn:x", kind="key-wrap")

    assert error.algorithm == "urn:x"
    assert error.kind == "key-wrap"


def test_crypto_errors_share_base() -> None:
    assert issubclass(DecryptionFailedError, CryptoError)
    assert issubclass(InvalidPublicKeyError, CryptoError)
    assert isinstance(KeyTooLargeError("big", key_size=300, max_size=214), XmlEncryptionError)

"""
Encryption and decryption configuration.
"""

from dataclasses import dataclass, fields

from xml_encryption.exceptions import ConfigurationError, MissingConfigurationError


def _require(config: object, names: tuple[str, ...]) -> None:
    for name in names:
        if not getattr(config, name):
            raise MissingConfigurationError(name)


def _check_encoding(name: str, encoding: str) -> None:
    # str.encode / bytes.decode refuse bytes-to-bytes and str-to-str codecs
    # such as "hex" or "rot13", which codecs.lookup alone accepts
    try:
        "".encode(encoding)
        b"".decode(encoding)
    except LookupError:
        msg = f"{name} is not a known text encoding"
        raise ConfigurationError(msg, encoding=encoding) from None


@dataclass(frozen=True, kw_only=True)
class EncryptionConfig:
    """
    Attributes:
        public_key: Recipient RSA public key (or certificate) as PEM.
        certificate: Recipient X.509 certificate as PEM, embedded in the envelope.
        key_wrap_algorithm: Key transport algorithm URI.
        content_encryption_algorithm: Content encryption algorithm URI.
        input_encoding: Encoding used to turn text content into bytes.
    """

    public_key: str | bytes | None = None
    certificate: str | bytes | None = None
    key_wrap_algorithm: str | None = None
    content_encryption_algorithm: str | None = None
    input_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        _require(self, tuple(f.name for f in fields(self)))
        _check_encoding("input_encoding", self.input_encoding)


@dataclass(frozen=True, kw_only=True)
class KeyInfoConfig:
    """
    Attributes:
        public_key: Recipient RSA public key (or certificate) as PEM.
        certificate: Recipient X.509 certificate as PEM, embedded in the envelope.
        key_wrap_algorithm: Key transport algorithm URI.
    """

    public_key: str | bytes | None = None
    certificate: str | bytes | None = None
    key_wrap_algorithm: str | None = None

    def __post_init__(self) -> None:
        _require(self, ("public_key", "certificate", "key_wrap_algorithm"))

    @classmethod
    def from_encryption_config(cls, config: EncryptionConfig) -> "KeyInfoConfig":
        return cls(
            public_key=config.public_key,
            certificate=config.certificate,
            key_wrap_algorithm=config.key_wrap_algorithm,
        )


@dataclass(frozen=True, kw_only=True)
class DecryptionConfig:
    """
    Attributes:
        private_key: Recipient RSA private key as PEM.
        private_key_password: Password of an encrypted private key PEM.
        output_encoding: Encoding used to turn decrypted bytes into text.
    """

    private_key: str | bytes | None = None
    private_key_password: str | bytes | None = None
    output_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        _require(self, ("private_key",))
        _check_encoding("output_encoding", self.output_encoding)

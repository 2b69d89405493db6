"""
XML backend implementation using the standard library ElementTree parser.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from xml.etree import ElementTree

from xml_encryption.exceptions import MalformedEnvelopeError


@dataclass(frozen=True)
class EtreeNode:
    """Wrapper around ElementTree.Element to implement the XmlNode protocol."""

    _element: ElementTree.Element

    @property
    def local_name(self) -> str:
        _, _, local = self._element.tag.rpartition("}")
        return local

    @property
    def namespace(self) -> str | None:
        tag = self._element.tag
        if tag.startswith("{"):
            return tag[1 : tag.index("}")]
        return None

    @property
    def text(self) -> str:
        return "".join(self._element.itertext())

    def children(self) -> Iterator["EtreeNode"]:
        for child in self._element:
            # Comments and processing instructions have non-string tags
            if isinstance(child.tag, str):
                yield EtreeNode(child)

    def get(self, attribute: str) -> str | None:
        return self._element.get(attribute)


class EtreeBackend:
    """
    XML backend implementation using xml.etree.ElementTree.

    Example:
        backend = EtreeBackend()
        root = backend.parse(xml)
    """

    @staticmethod
    def parse(xml: str | bytes) -> EtreeNode:
        """
        Parse an XML document.

        Raises:
            MalformedEnvelopeError: If the document is not well-formed.
        """
        try:
            return EtreeNode(ElementTree.fromstring(xml))
        except ElementTree.ParseError as e:
            msg = f"Failed to parse XML: {e}"
            raise MalformedEnvelopeError(msg) from e

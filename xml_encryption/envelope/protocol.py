"""
XML and template collaborator protocols.

These define the interfaces the envelope code relies on, allowing different
implementations (ElementTree, lxml, another template engine) to be swapped
without changing the rest of the codebase.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class XmlNode(Protocol):
    """
    Protocol for a read-only parsed XML element.

    Nodes wrapping the same element must compare and hash equal.
    """

    @property
    def local_name(self) -> str:
        """Element name without namespace or prefix."""
        ...

    @property
    def namespace(self) -> str | None:
        """Namespace URI, or None for elements in no namespace."""
        ...

    @property
    def text(self) -> str:
        """Concatenated text content of the element and its descendants."""
        ...

    def children(self) -> Iterable["XmlNode"]:
        """Direct child elements in document order."""
        ...

    def get(self, attribute: str) -> str | None:
        """Value of an unqualified attribute, or None if absent."""
        ...


@runtime_checkable
class XmlBackend(Protocol):
    """
    Abstract interface for XML parsing.

    Implementations can use ElementTree, lxml, or any parser that can expose
    elements as XmlNode.
    """

    def parse(self, xml: str | bytes) -> XmlNode:
        """
        Parse an XML document.

        Args:
            xml: Serialized XML document.

        Returns:
            The document element.

        Raises:
            MalformedEnvelopeError: If the document is not well-formed.
        """
        ...


@runtime_checkable
class TemplateRenderer(Protocol):
    """Abstract interface for rendering named markup templates."""

    def render(self, template_name: str, params: Mapping[str, Any]) -> str:
        """
        Render a template with a flat parameter map.

        Args:
            template_name: Name of the template, without extension.
            params: Values substituted into the template.

        Returns:
            The rendered markup.
        """
        ...

"""
Namespace-agnostic element lookup.

Producers pick arbitrary prefixes for the XML-Enc and XML-DSig namespaces,
so elements are matched by local name. Paths are "/"-separated local names:
the first step, and any step written after "//", matches descendants-or-self;
every other step matches direct children only.

    find_by_local_name(root, "EncryptedData/CipherData/CipherValue")
    find_by_local_name(key_info, "KeyInfo//CipherValue")
"""

from collections.abc import Iterator

from xml_encryption.envelope.protocol import XmlNode


def _parse_path(path: str) -> list[tuple[str, bool]]:
    steps: list[tuple[str, bool]] = []
    descendant = True
    for segment in path.split("/"):
        if not segment:
            descendant = True
            continue
        steps.append((segment, descendant))
        descendant = False
    if not steps:
        msg = f"Empty lookup path: {path!r}"
        raise ValueError(msg)
    return steps


def iter_descendants(node: XmlNode) -> Iterator[XmlNode]:
    """
    Yield ``node`` and all its descendant elements in document order.

    The walk keeps its own stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(current.children())))


def find_all_by_local_name(
    scope: XmlNode, path: str, *, namespace: str | None = None
) -> list[XmlNode]:
    """
    Find all elements matching ``path`` below ``scope``.

    Args:
        scope: Element the search starts from (included in the first step).
        path: Local-name path.
        namespace: If given, the last step must also be in this namespace.

    Returns:
        Matching elements in document order, without duplicates.
    """
    steps = _parse_path(path)
    current: list[XmlNode] = [scope]
    last = len(steps) - 1

    for index, (name, descendant) in enumerate(steps):
        matches: list[XmlNode] = []
        seen: set[XmlNode] = set()
        for node in current:
            candidates = iter_descendants(node) if descendant else node.children()
            for candidate in candidates:
                if candidate.local_name != name:
                    continue
                if index == last and namespace is not None and candidate.namespace != namespace:
                    continue
                if candidate in seen:
                    continue
                seen.add(candidate)
                matches.append(candidate)
        current = matches

    return current


def find_by_local_name(
    scope: XmlNode, path: str, *, namespace: str | None = None
) -> XmlNode | None:
    """First element matching ``path`` below ``scope``, or None."""
    matches = find_all_by_local_name(scope, path, namespace=namespace)
    return matches[0] if matches else None

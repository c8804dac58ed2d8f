"""Depth-first traversal over parsed BeautifulSoup trees."""

from typing import Callable, Optional

from bs4 import NavigableString, PageElement, Tag
from bs4.element import PreformattedString


def walk(root: PageElement, visitor: Callable[[PageElement], bool]) -> None:
    """
    Visit ``root`` and its descendants in pre-order, in document order.

    Traversal stops as soon as ``visitor`` returns False. An explicit stack is
    used so that deeply nested markup cannot exhaust the interpreter's
    recursion limit.
    """
    stack: list[PageElement] = [root]

    while stack:
        node = stack.pop()

        if not visitor(node):
            return

        if isinstance(node, Tag):
            # Reversed so that the leftmost child is popped first
            stack.extend(reversed(node.contents))


def element_text(root: PageElement) -> str:
    """Concatenate every text node under ``root``, skipping comments and doctypes."""
    parts: list[str] = []

    def collect(node: PageElement) -> bool:
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            parts.append(str(node))
        return True

    walk(root, collect)
    return "".join(parts)


def find_first(root: PageElement, predicate: Callable[[Tag], bool]) -> Optional[Tag]:
    """Return the first tag under ``root`` (excluding it) matching ``predicate``."""
    found: list[Tag] = []

    def match(node: PageElement) -> bool:
        if node is not root and isinstance(node, Tag) and predicate(node):
            found.append(node)
            return False
        return True

    walk(root, match)
    return found[0] if found else None


def child_text(root: Tag, name: str, **attrs: str) -> str:
    """Text of the first descendant tag called ``name`` with the given attributes."""

    def matches(tag: Tag) -> bool:
        return tag.name == name and all(tag.get(key) == value for key, value in attrs.items())

    child = find_first(root, matches)
    return element_text(child) if child is not None else ""


def child_attr(root: Tag, name: str, attr: str) -> str:
    """Attribute ``attr`` of the first descendant tag called ``name`` that has it."""
    child = find_first(root, lambda tag: tag.name == name and tag.has_attr(attr))
    if child is None:
        return ""
    value = child.get(attr)
    if isinstance(value, list):
        return " ".join(value)
    return value or ""

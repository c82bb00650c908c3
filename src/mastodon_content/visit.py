"""Walk status content and notify a visitor about its elements.

This is the low-level API: implement Visitor to be told about paragraphs,
links, text and line breaks in document order, then hand it to
visit_content. parse.py builds the tree representation on top of it.

Example:
    class LinkCounter(Visitor[int]):
        def __init__(self):
            self.count = 0

        def begin_link(self, link):
            self.count += 1

        def finalize(self):
            return self.count

    visit_content('<p><a href="https://example.com">x</a></p>', LinkCounter())
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import partial
from typing import Generic, TypeVar

from bs4 import BeautifulSoup
from bs4.element import PageElement

from .classify import VisitKind, classify_node
from .models import LinkKind

logger = logging.getLogger(__name__)

# HTML5 tree construction, so implied closes (<p>one<p>two) and </br> behave as in browsers
DEFAULT_PARSER = "html5lib"

ELLIPSIS_CHAR = "…"

Output = TypeVar("Output")


class Visitor(ABC, Generic[Output]):
    """Receives the elements of a status in document order.

    Begin/end calls are always properly nested. Text is coalesced: there is
    never more than one text() call between two structural callbacks.
    Every callback except finalize is a no-op by default.
    """

    def text(self, text: str) -> None:
        """Text found between two structural elements. Never empty."""

    def new_line(self) -> None:
        """A line break, usually inside a paragraph."""

    def begin_paragraph(self) -> None:
        """Start of a paragraph."""

    def end_paragraph(self) -> None:
        """End of a paragraph."""

    def begin_link(self, link: LinkKind) -> None:
        """Start of a link, mention or hashtag.

        The text of a mention starts with "@" and the text of a hashtag
        with "#".
        """

    def end_link(self, link: LinkKind) -> None:
        """End of a link; `link` is the object passed to begin_link."""

    @abstractmethod
    def finalize(self) -> Output:
        """Called once after the whole content has been visited."""


def visit_content(
    content: str, visitor: Visitor[Output], parser: str = DEFAULT_PARSER
) -> Output:
    """Parse `content` with BeautifulSoup and run `visitor` over it.

    `parser` is the BeautifulSoup tree builder; it raises bs4.FeatureNotFound
    if the builder is not installed.
    """
    soup = BeautifulSoup(content, parser, multi_valued_attributes=None)
    return visit_tree(soup, visitor)


def visit_tree(root: PageElement, visitor: Visitor[Output]) -> Output:
    """Run `visitor` over an already parsed tree.

    Trees parsed with BeautifulSoup defaults store `class` as a list of
    names, which is re-joined with single spaces: `class=" invisible"` then
    reads as "invisible", whereas visit_content compares the raw attribute.
    """
    return _Traversal(visitor).run(root)


class _Traversal(Generic[Output]):
    """Depth-first walk that owns the pending text buffer.

    The walk keeps an explicit stack of nodes still to enter and of closing
    actions, so nesting depth is bounded by memory, not the recursion limit.
    """

    def __init__(self, visitor: Visitor[Output]):
        self._visitor = visitor
        self._pending: list[str] = []

    def run(self, root: PageElement) -> Output:
        stack: list[PageElement | Callable[[], None]] = [root]
        while stack:
            item = stack.pop()
            # Tags are callable too, so test for nodes first
            if isinstance(item, PageElement):
                self._enter(item, stack)
            else:
                item()
        self._flush()
        return self._visitor.finalize()

    def _enter(self, node: PageElement, stack: list) -> None:
        classification = classify_node(node)
        match classification.kind:
            case VisitKind.NOTHING:
                pass
            case VisitKind.CHILDREN:
                self._push_children(node, stack)
            case VisitKind.TEXT:
                self._pending.append(classification.text)
            case VisitKind.NEW_LINE:
                self._flush()
                self._visitor.new_line()
            case VisitKind.ELLIPSIS:
                stack.append(partial(self._pending.append, ELLIPSIS_CHAR))
                self._push_children(node, stack)
            case VisitKind.PARAGRAPH:
                self._flush()
                self._visitor.begin_paragraph()
                stack.append(self._end_paragraph)
                self._push_children(node, stack)
            case VisitKind.LINK:
                link = classification.link
                self._flush()
                self._visitor.begin_link(link)
                stack.append(partial(self._end_link, link))
                self._push_children(node, stack)

    def _end_paragraph(self) -> None:
        self._flush()
        self._visitor.end_paragraph()

    def _end_link(self, link: LinkKind) -> None:
        self._flush()
        self._visitor.end_link(link)

    @staticmethod
    def _push_children(node: PageElement, stack: list) -> None:
        # Strings and comments have no contents
        children = getattr(node, "contents", None) or ()
        stack.extend(reversed(children))

    def _flush(self) -> None:
        if not self._pending:
            return
        text = "".join(self._pending)
        self._pending.clear()
        if text:
            self._visitor.text(text)

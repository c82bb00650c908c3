"""Parse status content into a tree of paragraphs.

The representation is:

- content is a list of paragraphs
- a paragraph is a list of ParagraphNode (Anchor, Text or NewLine)
- an Anchor (link, mention or hashtag) holds a list of LinkNode
- a LinkNode is Text or NewLine
"""

from .models import Anchor, Content, LinkKind, LinkNode, NewLine, Paragraph, Text
from .visit import DEFAULT_PARSER, Visitor, visit_content


def parse_content(content: str, parser: str = DEFAULT_PARSER) -> Content:
    """Extract the paragraphs of a Mastodon status content."""
    return visit_content(content, ContentBuilder(), parser=parser)


class ContentBuilder(Visitor[Content]):
    """Builds Content from the visitor callbacks.

    Only the outermost paragraph and the outermost link commit output.
    Malformed nesting (a paragraph inside a paragraph, a stray close) folds
    into the enclosing context. Text and line breaks outside a paragraph are
    dropped; a link outside one still lands in the next committed paragraph.
    """

    def __init__(self):
        self.paragraphs: Content = []
        self.paragraph_count = 0
        self.link_count = 0
        self.current_paragraph: Paragraph = []
        self.current_link: list[LinkNode] = []

    def text(self, text: str) -> None:
        self._push(Text(text))

    def new_line(self) -> None:
        self._push(NewLine())

    def _push(self, node: LinkNode) -> None:
        if self.paragraph_count == 0:
            return
        if self.link_count > 0:
            self.current_link.append(node)
        else:
            self.current_paragraph.append(node)

    def begin_paragraph(self) -> None:
        self.paragraph_count += 1

    def end_paragraph(self) -> None:
        self.paragraph_count = max(self.paragraph_count - 1, 0)
        if self.paragraph_count == 0:
            paragraph, self.current_paragraph = self.current_paragraph, []
            self.paragraphs.append(paragraph)

    def begin_link(self, link: LinkKind) -> None:
        self.link_count += 1

    def end_link(self, link: LinkKind) -> None:
        self.link_count = max(self.link_count - 1, 0)
        if self.link_count == 0:
            children, self.current_link = self.current_link, []
            self.current_paragraph.append(Anchor(kind=link, children=children))

    def finalize(self) -> Content:
        return self.paragraphs

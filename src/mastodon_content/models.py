"""Data models for parsed Mastodon status content.

Links, mentions and hashtags are all `<a>` tags in the markup; they are told
apart by class hints and URL structure (see classify.py).
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Link:
    href: str  # opaque, not necessarily a valid URL


@dataclass(frozen=True)
class Mention:
    href: str
    host: str  # instance domain, no leading @
    user: str  # handle, always with the leading @


@dataclass(frozen=True)
class Hashtag:
    href: str
    tag: str  # without the leading #


LinkKind = Link | Mention | Hashtag


@dataclass
class Text:
    text: str


@dataclass
class NewLine:
    """A <br> line break."""


@dataclass
class Anchor:
    """A link inside a paragraph, with the text and line breaks it wraps."""

    kind: LinkKind
    children: list["LinkNode"] = field(default_factory=list)


LinkNode = Text | NewLine
ParagraphNode = Anchor | Text | NewLine
Paragraph = list[ParagraphNode]
Content = list[Paragraph]

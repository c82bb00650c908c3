"""Parse Mastodon status content into paragraphs, links, mentions and hashtags."""

from .models import Anchor, Content, Hashtag, Link, LinkKind, Mention, NewLine, Text
from .parse import ContentBuilder, parse_content
from .visit import Visitor, visit_content, visit_tree

__version__ = "0.1.0"

__all__ = [
    "Anchor",
    "Content",
    "ContentBuilder",
    "Hashtag",
    "Link",
    "LinkKind",
    "Mention",
    "NewLine",
    "Text",
    "Visitor",
    "parse_content",
    "visit_content",
    "visit_tree",
]

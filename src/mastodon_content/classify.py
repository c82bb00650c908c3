"""Classify markup nodes into the semantic roles used by the traversal.

Mastodon writes status content with a small subset of HTML:

    <p>           paragraph
    <a>           link, mention (class "mention") or hashtag (class "hashtag")
    <span>        "invisible" parts of shortened URLs, "ellipsis" truncation
                  marker, or a plain wrapper
    <br>          line break

Everything else is treated as a transparent wrapper.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from .models import Hashtag, Link, LinkKind, Mention

logger = logging.getLogger(__name__)


class VisitKind(str, Enum):
    """What the traversal should do with a node."""

    NOTHING = "nothing"
    CHILDREN = "children"
    TEXT = "text"
    NEW_LINE = "new_line"
    ELLIPSIS = "ellipsis"
    PARAGRAPH = "paragraph"
    LINK = "link"


@dataclass(frozen=True)
class Classification:
    kind: VisitKind
    text: str = ""  # only for TEXT
    link: LinkKind | None = None  # only for LINK


NOTHING = Classification(VisitKind.NOTHING)
CHILDREN = Classification(VisitKind.CHILDREN)
NEW_LINE = Classification(VisitKind.NEW_LINE)
ELLIPSIS = Classification(VisitKind.ELLIPSIS)
PARAGRAPH = Classification(VisitKind.PARAGRAPH)


def classify_node(node: PageElement) -> Classification:
    """Classify a single node of a parsed BeautifulSoup tree."""
    if isinstance(node, Tag):
        return _classify_element(node)
    # Comment, Doctype, CData etc. subclass NavigableString but are not text
    if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
        return Classification(VisitKind.TEXT, text=str(node))
    return CHILDREN


def _classify_element(element: Tag) -> Classification:
    name = _local_name(element)
    if name == "p":
        return PARAGRAPH
    if name == "a":
        href = _attribute(element, "href")
        classes = set(_attribute(element, "class").split(" "))
        return Classification(VisitKind.LINK, link=classify_href(href, classes))
    if name == "span":
        match _attribute(element, "class"):
            case "invisible":
                return NOTHING
            case "ellipsis":
                return ELLIPSIS
            case _:
                return CHILDREN
    if name == "br":
        return NEW_LINE
    return CHILDREN


def _local_name(element: Tag) -> str:
    # Namespaced builders (lxml-xml) may report "prefix:name"
    return element.name.rsplit(":", 1)[-1].lower()


def _attribute(element: Tag, name: str) -> str:
    """Read an attribute as a string; missing attributes read as ""."""
    value = element.get(name)
    if value is None:
        return ""
    # BeautifulSoup splits multi-valued attributes such as class by default
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def classify_href(href: str, classes: set[str]) -> LinkKind:
    """Resolve an anchor's href and class names into a link kind.

    Hashtags and mentions need enough URL structure (a host for mentions,
    at least one path segment for both); anything short of that is a plain
    Link, as is any href that does not parse as an absolute URL.
    """
    special = _classify_special_href(href, classes)
    if special is not None:
        return special
    return Link(href=href)


def _classify_special_href(href: str, classes: set[str]) -> LinkKind | None:
    if "hashtag" not in classes and "mention" not in classes:
        return None

    try:
        url = urlsplit(href)
        host = url.hostname
    except ValueError as e:
        logger.debug("Unparseable href %r, treating as plain link: %s", href, e)
        return None
    if not url.scheme:
        logger.debug("Relative href %r, treating as plain link", href)
        return None

    segments = _path_segments(url.path)
    if "hashtag" in classes:
        if not segments:
            logger.debug("Hashtag href %r has no path segment", href)
            return None
        return Hashtag(href=href, tag=segments[-1])

    if not host or not segments:
        logger.debug("Mention href %r lacks a host or a path segment", href)
        return None
    user = segments[-1]
    if not user.startswith("@"):
        user = f"@{user}"
    return Mention(href=href, host=host, user=user)


def _path_segments(path: str) -> list[str]:
    # Opaque paths ("mailto:someone") have no segments
    if not path.startswith("/"):
        return []
    return [segment for segment in path.split("/") if segment]

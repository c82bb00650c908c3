"""Convert parsed content and event logs to JSON and CSV."""

import csv
import io
import json
from typing import TextIO

from .models import Anchor, Content, Hashtag, Link, LinkKind, Mention, NewLine, Text
from .visitors import Event

CSV_COLUMNS = [
    "paragraph",
    "type",
    "href",
    "host",
    "user",
    "tag",
    "text",
]


def link_kind_to_dict(link: LinkKind) -> dict:
    match link:
        case Mention(href=href, host=host, user=user):
            return {"type": "mention", "href": href, "host": host, "user": user}
        case Hashtag(href=href, tag=tag):
            return {"type": "hashtag", "href": href, "tag": tag}
        case Link(href=href):
            return {"type": "link", "href": href}
    raise TypeError(f"Not a link kind: {link!r}")


def node_to_dict(node: Anchor | Text | NewLine) -> dict:
    match node:
        case Text(text=text):
            return {"type": "text", "text": text}
        case NewLine():
            return {"type": "new_line"}
        case Anchor(kind=kind, children=children):
            return {
                **link_kind_to_dict(kind),
                "children": [node_to_dict(child) for child in children],
            }
    raise TypeError(f"Not a content node: {node!r}")


def content_to_dicts(content: Content) -> list[list[dict]]:
    """Convert content to JSON-compatible lists of dicts."""
    return [[node_to_dict(node) for node in paragraph] for paragraph in content]


def event_to_dict(event: Event) -> dict:
    data: dict = {"type": event.type.value}
    if event.text is not None:
        data["text"] = event.text
    if event.link is not None:
        data["link"] = link_kind_to_dict(event.link)
    return data


def content_to_json(
    content: Content, output: TextIO | None = None, indent: int | None = 2
) -> str:
    """Serialize content as JSON.

    Args:
        content: Parsed paragraphs.
        output: Optional file-like object to write to.
        indent: JSON indentation, None for a single line.

    Returns:
        The JSON document (also written to output if provided).
    """
    return _dump(content_to_dicts(content), output, indent)


def events_to_json(
    events: list[Event], output: TextIO | None = None, indent: int | None = 2
) -> str:
    """Serialize a visitor event log as a JSON array."""
    return _dump([event_to_dict(e) for e in events], output, indent)


def _dump(data: list, output: TextIO | None, indent: int | None) -> str:
    result = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
    if output is not None:
        output.write(result)
    return result


def links_to_csv(content: Content, output: TextIO | None = None) -> str:
    """List every link, mention and hashtag of the content as CSV.

    Args:
        content: Parsed paragraphs.
        output: Optional file-like object to write to. If None, returns CSV as string.

    Returns:
        CSV content as a string (also written to output if provided).
    """
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_COLUMNS, quoting=csv.QUOTE_MINIMAL)
    writer.writeheader()

    for index, paragraph in enumerate(content):
        for node in paragraph:
            if not isinstance(node, Anchor):
                continue
            row = dict.fromkeys(CSV_COLUMNS, "")
            row.update(link_kind_to_dict(node.kind))
            row["paragraph"] = index
            row["text"] = "".join(
                child.text if isinstance(child, Text) else "\n"
                for child in node.children
            )
            writer.writerow(row)

    result = buf.getvalue()
    if output is not None:
        output.write(result)
    return result

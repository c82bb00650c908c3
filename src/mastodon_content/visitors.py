"""Alternative visitors: a flat event log and a plain-text extractor."""

from dataclasses import dataclass
from enum import Enum

from .models import LinkKind
from .visit import DEFAULT_PARSER, Visitor, visit_content


class EventType(str, Enum):
    """Visitor callbacks, one per kind of recorded event."""

    TEXT = "text"
    NEW_LINE = "new_line"
    BEGIN_PARAGRAPH = "begin_paragraph"
    END_PARAGRAPH = "end_paragraph"
    BEGIN_LINK = "begin_link"
    END_LINK = "end_link"


@dataclass
class Event:
    type: EventType
    text: str | None = None  # TEXT only
    link: LinkKind | None = None  # BEGIN_LINK / END_LINK only


class EventRecorder(Visitor[list[Event]]):
    """Records every callback, in order, as an Event."""

    def __init__(self):
        self.events: list[Event] = []

    def text(self, text: str) -> None:
        self.events.append(Event(EventType.TEXT, text=text))

    def new_line(self) -> None:
        self.events.append(Event(EventType.NEW_LINE))

    def begin_paragraph(self) -> None:
        self.events.append(Event(EventType.BEGIN_PARAGRAPH))

    def end_paragraph(self) -> None:
        self.events.append(Event(EventType.END_PARAGRAPH))

    def begin_link(self, link: LinkKind) -> None:
        self.events.append(Event(EventType.BEGIN_LINK, link=link))

    def end_link(self, link: LinkKind) -> None:
        self.events.append(Event(EventType.END_LINK, link=link))

    def finalize(self) -> list[Event]:
        return self.events


def record_events(content: str, parser: str = DEFAULT_PARSER) -> list[Event]:
    """Return the flat sequence of visitor events for `content`."""
    return visit_content(content, EventRecorder(), parser=parser)


class PlainTextVisitor(Visitor[str]):
    """Flattens content to plain text.

    Line breaks become "\\n" and top-level paragraphs are separated by a
    blank line. Text outside paragraphs is kept.
    """

    def __init__(self):
        self._parts: list[str] = []
        self._depth = 0

    def text(self, text: str) -> None:
        self._parts.append(text)

    def new_line(self) -> None:
        self._parts.append("\n")

    def begin_paragraph(self) -> None:
        if self._depth == 0 and self._parts:
            self._parts.append("\n\n")
        self._depth += 1

    def end_paragraph(self) -> None:
        self._depth = max(self._depth - 1, 0)

    def finalize(self) -> str:
        return "".join(self._parts)


def extract_text(content: str, parser: str = DEFAULT_PARSER) -> str:
    """Return the visible text of `content`."""
    return visit_content(content, PlainTextVisitor(), parser=parser)

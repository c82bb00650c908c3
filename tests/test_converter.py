"""Tests for the JSON and CSV converters."""

import csv
import io
import json

from mastodon_content.converter import (
    CSV_COLUMNS,
    content_to_dicts,
    content_to_json,
    events_to_json,
    links_to_csv,
)
from mastodon_content.models import Anchor, Link, NewLine, Text
from mastodon_content.visitors import record_events


class TestContentToJson:
    def test_mentions(self, mentions_content):
        data = json.loads(content_to_json(mentions_content))
        assert len(data) == 2
        assert data[0][0] == {
            "type": "mention",
            "href": "https://mastodon.org.uk/@cybette",
            "host": "mastodon.org.uk",
            "user": "@cybette",
            "children": [{"type": "text", "text": "@cybette"}],
        }
        assert data[0][1] == {"type": "text", "text": " nice ! That's way better :)"}

    def test_hashtag_and_link(self, hashtags_content):
        data = content_to_dicts(hashtags_content)
        assert data[1][1]["type"] == "link"
        assert data[1][1]["href"] == (
            "https://www.reddit.com/r/comics/comments/10rukp8/oc_magic_coding/"
        )
        assert data[2][0] == {
            "type": "hashtag",
            "href": "https://dice.camp/tags/ttrpg",
            "tag": "ttrpg",
            "children": [{"type": "text", "text": "#ttrpg"}],
        }

    def test_new_line(self, newlines_content):
        data = content_to_dicts(newlines_content)
        assert data[0][1] == {"type": "new_line"}

    def test_keeps_unicode(self, hashtags_content):
        assert "…" in content_to_json(hashtags_content)

    def test_writes_to_output(self, newlines_content):
        buf = io.StringIO()
        result = content_to_json(newlines_content, output=buf)
        assert buf.getvalue() == result

    def test_single_line(self, newlines_content):
        result = content_to_json(newlines_content, indent=None)
        assert result.count("\n") == 1


class TestEventsToJson:
    def test_event_shapes(self):
        events = record_events('<p>a<br><a href="https://example.com">b</a></p>')
        data = json.loads(events_to_json(events))
        assert data == [
            {"type": "begin_paragraph"},
            {"type": "text", "text": "a"},
            {"type": "new_line"},
            {"type": "begin_link", "link": {"type": "link", "href": "https://example.com"}},
            {"type": "text", "text": "b"},
            {"type": "end_link", "link": {"type": "link", "href": "https://example.com"}},
            {"type": "end_paragraph"},
        ]


class TestLinksToCsv:
    def test_header_row(self, hashtags_content):
        reader = csv.reader(io.StringIO(links_to_csv(hashtags_content)))
        assert next(reader) == CSV_COLUMNS

    def test_one_row_per_link(self, hashtags_content):
        rows = list(csv.DictReader(io.StringIO(links_to_csv(hashtags_content))))
        assert [row["type"] for row in rows] == ["link", "hashtag", "hashtag", "hashtag"]
        assert [row["paragraph"] for row in rows] == ["1", "2", "2", "2"]

    def test_hashtag_fields(self, hashtags_content):
        rows = list(csv.DictReader(io.StringIO(links_to_csv(hashtags_content))))
        ttrpg = rows[1]
        assert ttrpg["tag"] == "ttrpg"
        assert ttrpg["text"] == "#ttrpg"
        assert ttrpg["host"] == ""
        assert ttrpg["user"] == ""

    def test_mention_fields(self, mentions_content):
        rows = list(csv.DictReader(io.StringIO(links_to_csv(mentions_content))))
        assert rows[1]["host"] == "fosstodon.org"
        assert rows[1]["user"] == "@cfgmgmtcamp"
        assert rows[1]["tag"] == ""

    def test_new_line_in_link_text(self):
        content = [[Anchor(Link(href="https://example.com"), [Text("a"), NewLine(), Text("b")])]]
        rows = list(csv.DictReader(io.StringIO(links_to_csv(content))))
        assert rows[0]["text"] == "a\nb"

    def test_no_links(self, newlines_content):
        reader = csv.reader(io.StringIO(links_to_csv(newlines_content)))
        assert len(list(reader)) == 1

    def test_writes_to_output(self, mentions_content):
        buf = io.StringIO()
        result = links_to_csv(mentions_content, output=buf)
        assert buf.getvalue() == result

"""Shared test fixtures."""

from pathlib import Path

import pytest

from mastodon_content.models import Anchor, Hashtag, Link, Mention, NewLine, Text

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8").strip()


@pytest.fixture
def hashtags_html() -> str:
    """Status 109805244883278164 on mastodon.social."""
    return load_fixture("real_with_hashtags.html")


@pytest.fixture
def mentions_html() -> str:
    """Status 109818097593839444 on mastodon.social."""
    return load_fixture("real_with_mentions.html")


@pytest.fixture
def newlines_html() -> str:
    """Status 109882001535463183 on mastodon.social."""
    return load_fixture("real_with_newlines.html")


REDDIT = Link(href="https://www.reddit.com/r/comics/comments/10rukp8/oc_magic_coding/")
TTRPG = Hashtag(href="https://dice.camp/tags/ttrpg", tag="ttrpg")
MAGIC = Hashtag(href="https://dice.camp/tags/magic", tag="magic")
CODING = Hashtag(href="https://dice.camp/tags/coding", tag="coding")
CYBETTE = Mention(href="https://mastodon.org.uk/@cybette", host="mastodon.org.uk", user="@cybette")
CFGMGMTCAMP = Mention(
    href="https://fosstodon.org/@cfgmgmtcamp", host="fosstodon.org", user="@cfgmgmtcamp"
)


@pytest.fixture
def hashtags_content() -> list:
    return [
        [Text("I have a feeling this will appeal to multiple people for multiple reasons.")],
        [
            Text("[original source: "),
            Anchor(REDDIT, [Text("reddit.com/r/comics/comments/1…")]),
            Text("]"),
        ],
        [
            Anchor(TTRPG, [Text("#ttrpg")]),
            Text(" "),
            Anchor(MAGIC, [Text("#magic")]),
            Text(" "),
            Anchor(CODING, [Text("#coding")]),
        ],
    ]


@pytest.fixture
def mentions_content() -> list:
    return [
        [
            Anchor(CYBETTE, [Text("@cybette")]),
            Text(" nice ! That's way better :)"),
        ],
        [
            Text("So basically, you had to take 2 sets of stickers. One for FOSDEM and one for "),
            Anchor(CFGMGMTCAMP, [Text("@cfgmgmtcamp")]),
            Text("  ?"),
        ],
    ]


@pytest.fixture
def newlines_content() -> list:
    return [[Text("Test 1 please ignore"), NewLine(), Text("Test 1 (cont)")]]

"""Configuration loading and saving.

Config file location: ~/.config/mastodon-content/config.toml

Schema:
    [parser]
    backend = "html5lib"  # BeautifulSoup tree builder

    [output]
    format = "tree"  # tree, events, text or links
    indent = 2  # 0 for single-line JSON
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w

from .visit import DEFAULT_PARSER

CONFIG_DIR = Path.home() / ".config" / "mastodon-content"
CONFIG_FILE = CONFIG_DIR / "config.toml"

OUTPUT_FORMATS = ("tree", "events", "text", "links")


@dataclass
class AppConfig:
    parser_backend: str = DEFAULT_PARSER
    output_format: str = "tree"
    indent: int = 2


def load_config(config_path: Path = CONFIG_FILE) -> AppConfig:
    """Load and validate config from TOML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    parser_data = data.get("parser", {})
    output_data = data.get("output", {})

    output_format = output_data.get("format", "tree")
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unknown output.format {output_format!r}, expected one of {', '.join(OUTPUT_FORMATS)}"
        )

    indent = int(output_data.get("indent", 2))
    if indent < 0:
        raise ValueError("output.indent must not be negative")

    return AppConfig(
        parser_backend=parser_data.get("backend", DEFAULT_PARSER),
        output_format=output_format,
        indent=indent,
    )


def load_config_or_default(config_path: Path = CONFIG_FILE) -> AppConfig:
    """Load the config file if there is one, defaults otherwise."""
    if not config_exists(config_path):
        return AppConfig()
    return load_config(config_path)


def save_config(config: AppConfig, config_path: Path = CONFIG_FILE) -> None:
    """Write config to TOML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "parser": {
            "backend": config.parser_backend,
        },
        "output": {
            "format": config.output_format,
            "indent": config.indent,
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)


def config_exists(config_path: Path = CONFIG_FILE) -> bool:
    """Check if config file exists."""
    return config_path.exists()

"""Extraction settings and config file loading."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from classfind.custom import Pattern
from classfind.errors import ConfigError

CONFIG_FILENAME = "classfind.toml"

DEFAULT_CLASS_ATTRIBUTES = ("class", "className", "ngClass", "class:list")

CSS_LANGUAGES = frozenset({"css", "scss", "sass", "less", "postcss", "stylus", "sugarss"})
SEMICOLONLESS_LANGUAGES = frozenset({"sass", "sugarss", "stylus"})
JSX_LANGUAGES = frozenset({"javascript", "javascriptreact", "typescript", "typescriptreact"})

# File extension -> language id
_EXTENSIONS: dict[str, str] = {
    ".html": "html",
    ".htm": "html",
    ".vue": "vue",
    ".svelte": "svelte",
    ".astro": "astro",
    ".php": "php",
    ".erb": "erb",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
    ".ts": "typescript",
    ".tsx": "typescriptreact",
    ".css": "css",
    ".pcss": "postcss",
    ".postcss": "postcss",
    ".scss": "scss",
    ".sass": "sass",
    ".less": "less",
    ".styl": "stylus",
    ".sss": "sugarss",
}


@dataclass(frozen=True, slots=True)
class Settings:
    """Everything the extraction pipeline reads from configuration."""

    class_attributes: tuple[str, ...] = DEFAULT_CLASS_ATTRIBUTES
    class_regex: tuple[Pattern, ...] = ()
    variant_groups: bool = False
    blocklist: frozenset[str] = frozenset()
    css_languages: frozenset[str] = CSS_LANGUAGES
    semicolonless_languages: frozenset[str] = SEMICOLONLESS_LANGUAGES
    jsx_languages: frozenset[str] = JSX_LANGUAGES

    def is_css_language(self, language_id: str) -> bool:
        return language_id in self.css_languages

    def is_semicolonless(self, language_id: str) -> bool:
        return language_id in self.semicolonless_languages

    def is_jsx_language(self, language_id: str) -> bool:
        return language_id in self.jsx_languages


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file: {exc}", path) from None


def _str_list(value: Any) -> list[str] | None:
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    return None


def settings_from_config(config: dict[str, Any], base: Settings | None = None) -> Settings:
    """Read the [classfind] table of a loaded config into Settings.

    Entries of the wrong type are ignored and keep their default.
    """
    settings = base or Settings()
    table = config.get("classfind")
    if not isinstance(table, dict):
        return settings

    changes: dict[str, Any] = {}

    attributes = _str_list(table.get("class_attributes"))
    if attributes is not None:
        changes["class_attributes"] = tuple(attributes)

    # Each entry is a pattern string or a [container, class] pair
    cfg_regex = table.get("class_regex")
    if isinstance(cfg_regex, list):
        patterns: list[Pattern] = []
        for entry in cfg_regex:
            if isinstance(entry, str):
                patterns.append(entry)
            elif _str_list(entry) is not None:
                patterns.append(tuple(entry))
        changes["class_regex"] = tuple(patterns)

    variant_groups = table.get("variant_groups")
    if isinstance(variant_groups, bool):
        changes["variant_groups"] = variant_groups

    blocklist = _str_list(table.get("blocklist"))
    if blocklist is not None:
        changes["blocklist"] = frozenset(blocklist)

    semicolonless = _str_list(table.get("semicolonless_languages"))
    if semicolonless is not None:
        changes["semicolonless_languages"] = settings.semicolonless_languages | frozenset(
            semicolonless
        )
        changes["css_languages"] = settings.css_languages | frozenset(semicolonless)

    return replace(settings, **changes)


def language_for_path(path: Path) -> str:
    """Guess a language id from a file extension; unknown extensions are html."""
    return _EXTENSIONS.get(path.suffix.lower(), "html")

"""Post-render normalization of formatted addresses.

A rendered template leaves artefacts wherever a component was missing:
dangling commas, doubled spaces, blank lines, repeated values. This module
removes them so the output is a clean block of lines ending with exactly
one newline. Normalizing an already normalized text returns it unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from address_formatter.core.replace import ReplaceRule, apply_text_rules

# Horizontal whitespace: any whitespace except a line feed
_H = r"[^\S\n]"

# Applied in order; each pass sees the output of the previous one
CLEANUP_REPLACEMENTS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"[},\s]+$"), ""),
    (re.compile(r"^[,\s]+"), ""),
    (re.compile(r"^- "), ""),  # line starting with a dash, leading field missing
    (re.compile(r",\s*,"), ", "),
    (re.compile(rf"{_H}+,{_H}+"), ", "),
    (re.compile(rf"{_H}{_H}+"), " "),
    (re.compile(rf"{_H}\n"), "\n"),
    (re.compile(r"\n,"), "\n"),
    (re.compile(r",,+"), ","),
    (re.compile(r",\n"), "\n"),
    (re.compile(rf"\n{_H}+"), "\n"),
    (re.compile(r"\n\n+"), "\n"),
]


def _dedup_adjacent(values: Iterable[str]) -> Iterator[str]:
    previous: str | None = None
    for value in values:
        if value != previous:
            yield value
        previous = value


def _apply_cleanup_replacements(text: str) -> str:
    # A later pass can expose an artefact an earlier pass already handled
    # (e.g. "- - x"), so the sequence runs until the text is stable.
    while True:
        cleaned = text
        for pattern, replacement in CLEANUP_REPLACEMENTS:
            cleaned = pattern.sub(replacement, cleaned)
        if cleaned == text:
            return cleaned
        text = cleaned


def dedup_lines(text: str) -> str:
    """Remove adjacent duplicate ", "-separated tokens, then adjacent duplicate lines."""
    lines = (
        ", ".join(_dedup_adjacent(token.strip() for token in line.split(", ")))
        for line in text.split("\n")
    )
    return "\n".join(_dedup_adjacent(lines))


def clean_rendered(text: str, postformat_rules: Iterable[ReplaceRule] = ()) -> str:
    """Normalize a rendered address.

    Args:
        text: Output of the template renderer.
        postformat_rules: Template-specific rules applied to the whole text
            once the generic cleanup is done.

    Returns:
        The cleaned address, with exactly one trailing newline.
    """
    text = _apply_cleanup_replacements(text)
    text = dedup_lines(text).strip()
    text = apply_text_rules(text, postformat_rules)
    return text.strip() + "\n"

"""Compiled regex replacement rules.

Rules come from the ``replace`` and ``postformat_replace`` lists of the
rule database. Each one is compiled once, when the configuration is
built, and applied to the first match only.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from address_formatter.models.address import Address
from address_formatter.models.enums import Component
from address_formatter.models.errors import ConfigurationError

# $1, ${1} or ${name} inside replacement text
_BACKREFERENCE_RE = re.compile(r"\$(?:(\d+)|\{(\w+)\})")


def _translate_replacement(text: str) -> str:
    """Convert replacement text to a ``re.sub`` template.

    Only ``$n``/``${n}`` group references are interpreted; backslashes and
    everything else are kept literally.
    """
    escaped = text.replace("\\", "\\\\")
    return _BACKREFERENCE_RE.sub(lambda m: rf"\g<{m.group(1) or m.group(2)}>", escaped)


@dataclass(frozen=True)
class ReplaceRule:
    """A compiled pattern and its replacement text.

    ``component`` is None for a global rule, applied to every component,
    or the single Component a scoped rule applies to.
    """

    pattern: re.Pattern[str]
    replacement: str
    component: Component | None = None

    def apply(self, value: str) -> str:
        """Replace the first match of the pattern in ``value``."""
        return self.pattern.sub(self.replacement, value, count=1)

    def applies_to(self, component: Component) -> bool:
        return self.component is None or self.component is component


def _compile(pattern: str, country: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError.create(
            "invalid regular expression '{pattern}' for {country}: {reason}",
            pattern=pattern,
            country=country,
            reason=str(exc),
        ) from exc


def _split_entry(entry: Any, country: str) -> tuple[str, str]:
    if (
        not isinstance(entry, Sequence)
        or isinstance(entry, str)
        or len(entry) != 2
        or not all(isinstance(part, str) for part in entry)
    ):
        raise ConfigurationError.create(
            "replace rule for {country} must be a [pattern, replacement] pair, got {entry}",
            country=country,
            entry=repr(entry),
        )
    return entry[0], entry[1]


def compile_replace_rule(entry: Any, country: str, *, scoped: bool = True) -> ReplaceRule:
    """Compile one ``[pattern, replacement]`` entry.

    With ``scoped`` set, a pattern written ``component=regex`` only applies
    to that component.

    Args:
        entry: Raw rule from the configuration tree.
        country: Key of the rule block, for error messages.
        scoped: Whether ``component=`` prefixes are recognized.

    Returns:
        The compiled rule.

    Raises:
        ConfigurationError: On malformed entries, unknown components or
            invalid regular expressions.
    """
    pattern, replacement = _split_entry(entry, country)
    component: Component | None = None

    if scoped and "=" in pattern:
        name, pattern = pattern.split("=", 1)
        component = Component.from_name(name)
        if component is None:
            raise ConfigurationError.create(
                "in replace rule for {country}, '{name}' is not a valid component",
                country=country,
                name=name,
            )

    return ReplaceRule(
        pattern=_compile(pattern, country),
        replacement=_translate_replacement(replacement),
        component=component,
    )


def compile_replace_rules(
    entries: Iterable[Any] | None, country: str, *, scoped: bool = True
) -> tuple[ReplaceRule, ...]:
    """Compile a list of rule entries, keeping their order."""
    if entries is None:
        return ()
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Iterable):
        raise ConfigurationError.create(
            "replace rules for {country} must be a list", country=country
        )
    return tuple(compile_replace_rule(e, country, scoped=scoped) for e in entries)


def apply_replace_rules(address: Address, rules: Iterable[ReplaceRule]) -> None:
    """Apply rules, in order, to the component values of ``address`` in place.

    Global rules run over every component that holds a value; scoped rules
    only over their own component. Later rules see earlier results.
    """
    for rule in rules:
        for component in Component:
            value = address[component]
            if value and rule.applies_to(component):
                address[component] = rule.apply(value)


def apply_text_rules(text: str, rules: Iterable[ReplaceRule]) -> str:
    """Apply rules, in order, to a whole rendered text."""
    for rule in rules:
        text = rule.apply(text)
    return text

from __future__ import annotations

import itertools
from collections.abc import Callable, Mapping
from typing import Any

import pystache

from address_formatter.renderers.base import BaseTemplateRenderer, FirstNonEmptyHelper

FIRST_HELPER_NAME = "first"


class PystacheRenderer(BaseTemplateRenderer):
    """Template renderer backed by pystache (Mustache).

    Values are substituted verbatim (no HTML escaping) and missing
    components render as empty strings. The ``first`` helper is exposed to
    pystache as a section lambda.
    """

    def __init__(self, first_helper: FirstNonEmptyHelper | None = None) -> None:
        super().__init__(first_helper)
        self._engine = pystache.Renderer(escape=lambda u: u, missing_tags="ignore")

    @property
    def name(self) -> str:
        return "pystache"

    def _render_impl(self, template: str, context: Mapping[str, str]) -> str:
        scope: dict[str, Any] = dict(context)
        scope[FIRST_HELPER_NAME] = self._first_lambda(scope)
        return self._engine.render(template, scope)

    def _first_lambda(self, scope: dict[str, Any]) -> Callable[[str], str]:
        """Build the section lambda implementing ``first`` for one render call."""
        counter = itertools.count()

        def render_fragment(fragment: str) -> str:
            return self._engine.render(fragment, scope)

        def first(content: str) -> str:
            chosen = self._first_helper.render_block(content, render_fragment)
            # pystache renders whatever a lambda returns as a template, so the
            # value goes through the scope to come out verbatim
            key = f"__first_{next(counter)}"
            scope[key] = chosen
            return "{{{%s}}}" % key

        return first

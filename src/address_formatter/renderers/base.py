from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping

from address_formatter.data.constants import FIRST_SEPARATOR
from address_formatter.models.errors import TemplateRenderError

logger = logging.getLogger(__name__)


class FirstNonEmptyHelper:
    """The ``{{#first}} a || b || c {{/first}}`` block helper.

    Renders the raw block content, splits it on ``" || "`` and keeps the
    first alternative that is not blank once trimmed. Engines only have to
    call ``render_block`` from whatever block-helper hook they provide.
    """

    separator: str = FIRST_SEPARATOR

    def render_block(self, content: str, render: Callable[[str], str]) -> str:
        """Select the first non-empty alternative of a block.

        Args:
            content: Raw (unrendered) block content.
            render: Renders a template fragment with the current values.

        Returns:
            The first non-empty trimmed alternative, or "" if all are empty.
        """
        for segment in render(content).split(self.separator):
            segment = segment.strip()
            if segment:
                return segment
        return ""


class BaseTemplateRenderer(ABC):
    """Abstract base class for template renderers.

    Provides common error handling. Subclasses must implement the
    _render_impl method and hook the ``first`` helper into their engine.
    """

    def __init__(self, first_helper: FirstNonEmptyHelper | None = None) -> None:
        """Initialize the renderer.

        Args:
            first_helper: Implementation of the ``first`` block helper.
        """
        self._first_helper = first_helper or FirstNonEmptyHelper()

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this renderer implementation."""
        ...

    @abstractmethod
    def _render_impl(self, template: str, context: Mapping[str, str]) -> str:
        """Internal implementation of template rendering.

        Args:
            template: Template text.
            context: Component name -> value, for the components that are set.

        Returns:
            The raw rendered text.

        Raises:
            Exception: If rendering fails.
        """
        ...

    def render(self, template: str, context: Mapping[str, str]) -> str:
        """Render a template against address values.

        Args:
            template: Template text.
            context: Component name -> value, for the components that are set.

        Returns:
            The raw rendered text, before any cleanup.

        Raises:
            TemplateRenderError: Wrapping whatever the engine raised.
        """
        try:
            return self._render_impl(template, context)
        except Exception as e:
            logger.debug("%s renderer failed: %s", self.name, e)
            raise TemplateRenderError.from_exception(
                "render_error",
                "impossible to render template: {reason}",
                e,
                {"renderer": self.name},
            ) from e

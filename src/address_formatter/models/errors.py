"""Error classes for address formatting.

All errors derive from PydanticCustomError so callers get a ``type``,
a message template and a ``context`` dict carrying the package name,
consistent with pydantic's own error handling.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "address_formatter"


class AddressFormatterError(PydanticCustomError):
    """Base exception for address_formatter.

    Construct with ``(error_type, message_template, context)``. Dynamic values
    belong in ``context`` and are referenced from the message as ``{key}``.
    """

    @classmethod
    def from_exception(
        cls,
        error_type: str,
        message: str,
        error: Exception,
        context: dict | None = None,
    ) -> AddressFormatterError:
        """Wrap an arbitrary exception, keeping its text under ``reason``.

        Args:
            error_type: Type/category of the error.
            message: Message template; may reference ``{reason}``.
            error: The underlying exception.
            context: Additional context to include in the error.

        Returns:
            Error instance with package and reason in its context.
        """
        ctx = {
            "package": PACKAGE_NAME,
            "reason": str(error),
            **(context or {}),
        }
        return cls(error_type, message, ctx)


class ConfigurationError(AddressFormatterError):
    """The rule database is missing data or contains an invalid rule.

    Raised only while a formatter is being built; a formatter is never
    constructed from a defective configuration.
    """

    @classmethod
    def create(cls, message: str, **context: object) -> ConfigurationError:
        """Build a configuration error with package context."""
        return cls("configuration_error", message, {"package": PACKAGE_NAME, **context})


class InvalidCountryCodeError(AddressFormatterError):
    """A country code string is not a 2-letter code."""


class TemplateRenderError(AddressFormatterError):
    """The templating engine failed to render an address template."""

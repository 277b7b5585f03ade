from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from address_formatter.core import (
    apply_replace_rules,
    clean_rendered,
    sanity_clean_address,
)
from address_formatter.data import ConfigSourceFactory, DictConfigSource
from address_formatter.data.constants import COMPONENT_REFERENCE_RE, NL_TERRITORIES
from address_formatter.models import (
    Address,
    Component,
    CountryCode,
    FormatterConfig,
    InvalidCountryCodeError,
)
from address_formatter.models.builder import Pairs
from address_formatter.models.builder import build_address as _build_address
from address_formatter.renderers import RendererFactory
from address_formatter.templates import Template, Templates, build_configuration
from address_formatter.templates import select_template as _select_template
from address_formatter.templates.selector import has_minimum_components

if TYPE_CHECKING:
    import pandas as pd

    from address_formatter.protocols import (
        ConfigSourceProtocol,
        MinimumComponentsPredicate,
        TemplateRendererProtocol,
    )

logger = logging.getLogger(__name__)

AddressInput = Union[Address, Pairs]
ConfigInput = Union[FormatterConfig, Mapping[str, Any], None]


def _to_config(config: ConfigInput) -> FormatterConfig:
    if config is None:
        return FormatterConfig()
    if isinstance(config, FormatterConfig):
        return config
    return FormatterConfig.model_validate(dict(config))


def _substitute_components(text: str, address: Address) -> str:
    """Replace ``$component`` references with the component's value."""

    def _value(match: Any) -> str:
        component = Component.from_name(match.group(1))
        if component is None:
            return match.group(0)
        return address.get(component) or ""

    return COMPONENT_REFERENCE_RE.sub(_value, text).strip()


def _apply_directives(address: Address, template: Template) -> None:
    """Apply the ``change_country`` and ``add_component`` directives of a template."""
    if template.change_country is not None:
        address[Component.COUNTRY] = _substitute_components(template.change_country, address)
    if template.add_component is not None:
        address[template.add_component.component] = template.add_component.value


class AddressFormatter:
    """High-level facade for address formatting.

    Loads the rule database once, then formats any number of addresses.
    The compiled templates and alias table are never mutated after
    construction, so one instance can be shared between threads.

    Example:
        >>> formatter = AddressFormatter()
        >>> formatter.format({"house_number": "17", "road": "Rue du Taur",
        ...                   "postcode": "31000", "city": "Toulouse",
        ...                   "country": "France", "country_code": "FR"})
        '17 Rue du Taur\\n31000 Toulouse\\nFrance\\n'

        # Custom components
        >>> from address_formatter.data import YAMLConfigSource
        >>> formatter = AddressFormatter(config_source=YAMLConfigSource("/path/to/conf"))
    """

    def __init__(
        self,
        config_source: ConfigSourceProtocol | None = None,
        renderer: TemplateRendererProtocol | None = None,
        minimum_components: MinimumComponentsPredicate | None = None,
    ) -> None:
        """Initialize the address formatter.

        Args:
            config_source: Rule database source. Defaults to the bundled YAML files.
            renderer: Template renderer. Defaults to PystacheRenderer.
            minimum_components: Predicate deciding whether an address is
                complete enough for its country template. Defaults to
                "has a road or a city".

        Raises:
            ConfigurationError: If the rule database is missing data or invalid.
        """
        self._config_source = config_source or ConfigSourceFactory.create()
        self._renderer = renderer or RendererFactory.create()
        self._minimum_components = minimum_components or has_minimum_components

        templates, aliases = build_configuration(
            self._config_source.load_components(),
            self._config_source.load_countries(),
        )
        self._templates = templates
        self._aliases = MappingProxyType(aliases)

    @classmethod
    def from_config(
        cls,
        components: list[Mapping[str, Any]],
        countries: Mapping[Any, Any],
        *,
        renderer: TemplateRendererProtocol | None = None,
        minimum_components: MinimumComponentsPredicate | None = None,
    ) -> AddressFormatter:
        """Build a formatter from already parsed configuration trees.

        Args:
            components: Component definitions (``{name, aliases}``).
            countries: Country rule blocks, including ``default``.
            renderer: Template renderer. Defaults to PystacheRenderer.
            minimum_components: Completeness predicate of the selector.

        Returns:
            A ready to use AddressFormatter.
        """
        return cls(
            config_source=DictConfigSource(components, countries),
            renderer=renderer,
            minimum_components=minimum_components,
        )

    @property
    def config_source(self) -> ConfigSourceProtocol:
        """Get the config source instance."""
        return self._config_source

    @property
    def renderer(self) -> TemplateRendererProtocol:
        """Get the renderer instance."""
        return self._renderer

    @property
    def templates(self) -> Templates:
        """Get the compiled template registry."""
        return self._templates

    @property
    def aliases(self) -> Mapping[str, Component]:
        """Get the alias table (raw field name -> Component)."""
        return self._aliases

    def supported_countries(self) -> list[str]:
        """Country codes having their own template, sorted."""
        return [str(code) for code in self._templates.countries]

    def build_address(self, pairs: Pairs) -> Address:
        """Build an Address from arbitrary ``(name, value)`` pairs.

        Canonical names are assigned directly, aliases fill empty components
        and anything else is gathered into the attention component.
        """
        return _build_address(pairs, self._aliases)

    def _to_address(self, address: AddressInput) -> Address:
        if isinstance(address, Address):
            return address
        return self.build_address(address)

    # -------------------------------------------------------------------------
    # Country resolution and template selection
    # -------------------------------------------------------------------------

    def find_country_code(
        self,
        address: Address,
        override: str | None = None,
    ) -> CountryCode | None:
        """Resolve the country of an address.

        Args:
            address: Address whose ``country_code`` is used without override.
            override: Country code taking precedence over the address's own.

        Returns:
            The parsed CountryCode, or None when no usable code is available.
            An invalid code is logged, not raised.
        """
        raw = override or address.get(Component.COUNTRY_CODE)
        if raw is None:
            return None
        try:
            return CountryCode.parse(raw)
        except InvalidCountryCodeError as e:
            logger.info("Ignoring invalid country code %r: %s", raw, e)
            return None

    def _remap_territory(self, address: Address, country_code: CountryCode) -> CountryCode:
        """Move NL addresses of Caribbean constituent countries to their own code."""
        if country_code.value != "NL":
            return country_code
        state = address.get(Component.STATE)
        territory = NL_TERRITORIES.get(state.lower()) if state else None
        if territory is None:
            return country_code

        code, name = territory
        logger.debug("Remapping NL address in %s to %s", state, code)
        address[Component.COUNTRY] = name
        return CountryCode(code)

    def select_template(self, country_code: CountryCode | None, address: Address) -> Template:
        """Pick the template for an address, see ``templates.select_template``."""
        return _select_template(
            self._templates, country_code, address, self._minimum_components
        )

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def format(self, address: AddressInput) -> str:
        """Format an address with default options.

        Args:
            address: Address, or mapping/pairs routed through ``build_address``.

        Returns:
            The formatted address, one component group per line, ending with
            exactly one newline.

        Raises:
            TemplateRenderError: If the selected template cannot be rendered.
        """
        return self.format_with_config(address)

    def format_with_config(self, address: AddressInput, config: ConfigInput = None) -> str:
        """Format an address with explicit options.

        Args:
            address: Address, or mapping/pairs routed through ``build_address``.
            config: FormatterConfig or mapping with ``country_code`` and
                ``abbreviate`` keys.

        Returns:
            The formatted address ending with exactly one newline.

        Raises:
            TemplateRenderError: If the selected template cannot be rendered.
            pydantic.ValidationError: If ``config`` has unknown keys.
        """
        config = _to_config(config)
        if config.abbreviate:
            logger.debug("Abbreviation is not supported, formatting unabbreviated")

        # The caller's address is never modified
        working = self._to_address(address).model_copy()

        country_code = self.find_country_code(working, config.country_code)
        if country_code is not None:
            country_code = self._remap_territory(working, country_code)

        sanity_clean_address(working)

        template = self.select_template(country_code, working)
        _apply_directives(working, template)
        apply_replace_rules(working, template.replace)

        text = self._renderer.render(template.address_template, working.to_context())
        return clean_rendered(text, template.postformat_replace)

    def format_one_line(self, address: AddressInput, config: ConfigInput = None) -> str:
        """Format an address as a single ", "-separated line (no newline)."""
        return ", ".join(self.format_with_config(address, config).splitlines())

    # -------------------------------------------------------------------------
    # Pandas integration methods
    # -------------------------------------------------------------------------

    def format_row(
        self,
        row: Mapping[str, Any],
        *,
        country_code: str | None = None,
        one_line: bool = False,
        errors: str = "raise",
    ) -> str | None:
        """Format one record of component columns.

        Args:
            row: Mapping of column name -> value (e.g. a DataFrame row).
            country_code: Optional country override.
            one_line: If True, return the single-line form.
            errors: "raise" to propagate failures, "coerce" to return None.

        Returns:
            The formatted address, or None for a failed row under "coerce".
        """
        config = FormatterConfig(country_code=country_code)
        try:
            if one_line:
                return self.format_one_line(row, config)
            return self.format_with_config(row, config)
        except ValueError as e:
            if errors == "raise":
                raise
            logger.warning("Failed to format row: %s", e)
            return None

    def format_dataframe(
        self,
        df: pd.DataFrame,
        *,
        column: str = "formatted_address",
        country_code: str | None = None,
        one_line: bool = False,
        errors: str = "raise",
        inplace: bool = False,
    ) -> pd.DataFrame:
        """Format every row of a DataFrame of address components.

        Args:
            df: Input DataFrame; column names are component names or aliases.
            column: Name of the column receiving the formatted addresses.
            country_code: Optional country override for every row.
            one_line: If True, store the single-line form.
            errors: "raise" or "coerce" (None for rows that fail).
            inplace: If True, modify df in place.

        Returns:
            DataFrame with the formatted address column added.
        """
        import pandas as pd

        if not inplace:
            df = df.copy()

        values = [
            self.format_row(row, country_code=country_code, one_line=one_line, errors=errors)
            for row in df.to_dict(orient="records")
        ]
        # object dtype keeps None for coerced rows instead of a string NaN
        df[column] = pd.Series(values, index=df.index, dtype=object)
        return df


# Module-level convenience functions
_default_formatter: AddressFormatter | None = None


def get_default_formatter() -> AddressFormatter:
    """Get the default AddressFormatter singleton.

    Returns:
        Shared AddressFormatter built from the bundled rule database.
    """
    global _default_formatter
    if _default_formatter is None:
        _default_formatter = AddressFormatter()
    return _default_formatter


def format_address(address: AddressInput, config: ConfigInput = None) -> str:
    """Format an address using the default formatter.

    Args:
        address: Address, or mapping/pairs of component names and values.
        config: Optional FormatterConfig or mapping.

    Returns:
        The formatted address ending with exactly one newline.
    """
    return get_default_formatter().format_with_config(address, config)


def build_address(pairs: Pairs) -> Address:
    """Build an Address with the alias table of the default formatter."""
    return get_default_formatter().build_address(pairs)

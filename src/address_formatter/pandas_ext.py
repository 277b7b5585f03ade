from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd

    from address_formatter.service import AddressFormatter


class AddressFormatterAccessor:
    """Pandas accessor for address formatting.

    Formats DataFrames whose columns are address components (canonical
    names or aliases), one address per row.

    Usage:
        >>> from address_formatter.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"road": ["Rue du Taur"], "city": ["Toulouse"],
        ...                    "country_code": ["FR"]})
        >>> df.addr.format()
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj

    def format(
        self,
        *,
        country_code: str | None = None,
        one_line: bool = False,
        errors: str = "raise",
        formatter: AddressFormatter | None = None,
    ) -> pd.Series:
        """Format each row of the DataFrame.

        Args:
            country_code: Optional country override for every row.
            one_line: If True, return single-line addresses.
            errors: "raise" or "coerce" (None for rows that fail).
            formatter: Optional AddressFormatter to use.

        Returns:
            Series of formatted addresses aligned with the DataFrame index.
        """
        import pandas as pd

        from address_formatter.service import get_default_formatter

        fmt = formatter or get_default_formatter()
        values = [
            fmt.format_row(row, country_code=country_code, one_line=one_line, errors=errors)
            for row in self._obj.to_dict(orient="records")
        ]
        return pd.Series(values, index=self._obj.index, dtype=object)


def register_accessor(name: str = "addr") -> None:
    """Register the address accessor on pandas DataFrame.

    After calling this, you can use:
        >>> df.addr.format()

    Args:
        name: Name for the accessor (default: "addr").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(AddressFormatterAccessor)


def format_addresses(
    df: pd.DataFrame,
    column: str = "formatted_address",
    *,
    country_code: str | None = None,
    one_line: bool = False,
    errors: str = "raise",
    inplace: bool = False,
    formatter: AddressFormatter | None = None,
) -> pd.DataFrame:
    """Format the addresses of a DataFrame into a new column.

    Note: Equivalent to AddressFormatter.format_dataframe().

    Args:
        df: Input DataFrame with one column per address component.
        column: Name of the column receiving the formatted addresses.
        country_code: Optional country override for every row.
        one_line: If True, store single-line addresses.
        errors: "raise" or "coerce" (None for rows that fail).
        inplace: If True, modify DataFrame in place.
        formatter: Optional AddressFormatter to use.

    Returns:
        DataFrame with the formatted address column.
    """
    from address_formatter.service import get_default_formatter

    fmt = formatter or get_default_formatter()
    return fmt.format_dataframe(
        df,
        column=column,
        country_code=country_code,
        one_line=one_line,
        errors=errors,
        inplace=inplace,
    )

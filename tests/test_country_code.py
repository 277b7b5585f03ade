import pytest

from address_formatter.models import CountryCode, InvalidCountryCodeError


class TestCountryCodeParse:
    """Test CountryCode parsing and normalization."""

    def test_lowercase_is_uppercased(self) -> None:
        assert CountryCode.parse("fr") == CountryCode("FR")

    def test_uk_is_mapped_to_gb(self) -> None:
        """The historical UK code should be normalized to GB."""
        assert CountryCode.parse("uk") == CountryCode("GB")
        assert CountryCode.parse("UK").value == "GB"

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert CountryCode.parse(" de ") == CountryCode("DE")

    def test_three_letter_code_fails(self) -> None:
        with pytest.raises(InvalidCountryCodeError):
            CountryCode.parse("FRA")

    @pytest.mark.parametrize("raw", ["", "F", "FRA", "FRANCE"])
    def test_wrong_length_fails(self, raw: str) -> None:
        with pytest.raises(InvalidCountryCodeError) as exc_info:
            CountryCode.parse(raw)

        assert exc_info.value.type == "invalid_country_code"
        assert exc_info.value.context["package"] == "address_formatter"

    def test_error_is_a_value_error(self) -> None:
        """Errors should be catchable as ValueError, like pydantic errors."""
        with pytest.raises(ValueError):
            CountryCode("XYZ")

    def test_str(self) -> None:
        assert str(CountryCode("nl")) == "NL"

    def test_hashable(self) -> None:
        """Country codes are used as registry keys."""
        registry = {CountryCode("fr"): "France"}
        assert registry[CountryCode("FR")] == "France"


class TestCountryCodeIsValid:
    """Test the syntactic validity check."""

    @pytest.mark.parametrize("raw", ["FR", "fr", " gb ", "uk"])
    def test_valid(self, raw: str) -> None:
        assert CountryCode.is_valid(raw)

    @pytest.mark.parametrize("raw", ["", "FRA", None, False, 12])
    def test_invalid(self, raw: object) -> None:
        assert not CountryCode.is_valid(raw)

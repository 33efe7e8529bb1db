"""Tests for the country registry."""

# Third-party imports
import pycountry
import pytest

# Application imports
from apps.banks.domain import BankRecord
from apps.banks.validation import BankRecordValidator
from apps.countries.registry import CountryRegistry

REGISTRY = CountryRegistry.from_iso3166()


class TestCountryRegistry:
    """Test cases for looking up canonical country names."""

    @pytest.mark.parametrize(
        "country_code, name",
        [("PL", "POLAND"), ("DE", "GERMANY"), ("FR", "FRANCE")],
    )
    def test_lookup(self, country_code: str, name: str) -> None:
        """Asserts that known codes map to uppercased names."""
        assert REGISTRY.lookup_canonical_name(country_code) == (name, True)

    @pytest.mark.parametrize("country_code", ["XX", "pl", "", "POL"])
    def test_lookup_unknown(self, country_code: str) -> None:
        """Asserts that lookups are exact and report a miss."""
        assert REGISTRY.lookup_canonical_name(country_code) == ("", False)
        assert country_code not in REGISTRY

    def test_complete(self) -> None:
        """Asserts that every ISO 3166-1 country is present."""
        assert len(REGISTRY) == len(pycountry.countries)

    def test_names_are_uppercase(self) -> None:
        assert all(name == name.upper() for name in REGISTRY.values())

    def test_immutable(self) -> None:
        """Asserts that entries cannot be added or replaced."""
        with pytest.raises(TypeError):
            REGISTRY["PL"] = "POLSKA"
        with pytest.raises(TypeError):
            REGISTRY._names["PL"] = "POLSKA"
        assert REGISTRY["PL"] == "POLAND"

    def test_custom_entries(self) -> None:
        """Asserts that a registry can be built from arbitrary pairs."""
        registry = CountryRegistry([("AA", "Atlantis")])
        assert dict(registry) == {"AA": "ATLANTIS"}

    @pytest.mark.parametrize("country_code", sorted(REGISTRY))
    def test_every_country_validates(self, country_code: str) -> None:
        """Asserts that each registered name is accepted for its own code."""
        name, _ = REGISTRY.lookup_canonical_name(country_code)
        record = BankRecord(
            code=f"TEST{country_code}33XXX",
            name="Test Bank",
            country_code=country_code,
            country_name=name,
            address="1 Test Street",
            is_headquarters=True,
        )
        BankRecordValidator(REGISTRY).validate(record)

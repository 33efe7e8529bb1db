"""Provides a read-only registry of ISO 3166-1 country codes and names."""

# Standard library imports
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

# Third-party imports
import pycountry


class CountryRegistry(Mapping):
    """An immutable lookup table mapping two-letter country codes
    to canonical, uppercased country names.

    Lookups are exact: only uppercase alpha-2 codes are recognized.
    """

    def __init__(self, entries: Iterable[tuple[str, str]]) -> None:
        """Initializes a new instance of a `CountryRegistry`.

        Args:
            entries: Pairs of alpha-2 codes and country names. Names
                are normalized to uppercase.

        Returns:
            `None`
        """
        self._names = MappingProxyType(
            {code: name.upper() for code, name in entries}
        )

    @classmethod
    def from_iso3166(cls) -> "CountryRegistry":
        """Builds a registry from the ISO 3166-1 data shipped with `pycountry`.

        Returns:
            The registry.
        """
        return cls((c.alpha_2, c.name) for c in pycountry.countries)

    def lookup_canonical_name(self, country_code: str) -> tuple[str, bool]:
        """Looks up the canonical name of a country.

        Never raises. Callers decide how to treat unknown codes.

        Args:
            country_code: The two-letter country code.

        Returns:
            A two-item tuple consisting of the uppercased country
                name (or an empty string) and a boolean indicating
                whether the code was found.
        """
        name = self._names.get(country_code)
        if name is None:
            return "", False
        return name, True

    def __getitem__(self, country_code: str) -> str:
        return self._names[country_code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

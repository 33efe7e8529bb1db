"""Domain entities shared by the validation and storage layers."""

# Standard library imports
from dataclasses import dataclass, field


@dataclass(frozen=True)
class BranchSummary:
    """A reduced view of a bank record, listed under a headquarters
    or a country. Omits the country name.
    """

    address: str
    """The street address of the bank."""

    name: str
    """The name of the bank."""

    country_code: str
    """The ISO 3166-1 alpha-2 code of the country the bank is located in."""

    is_headquarters: bool
    """Whether the record represents the bank's headquarters."""

    code: str
    """The SWIFT/BIC code."""


@dataclass
class BankRecord:
    """A bank headquarters or branch.

    Every field except `branches` may be `None` to represent a value
    absent from the caller's input. Records read from storage are
    always fully populated.
    """

    code: str | None = None
    """The 8- or 11-character SWIFT/BIC code. Globally unique."""

    name: str | None = None
    """The name of the bank."""

    country_code: str | None = None
    """The ISO 3166-1 alpha-2 code of the country the bank is located in."""

    country_name: str | None = None
    """The uppercased name of the country the bank is located in."""

    address: str | None = None
    """The street address of the bank."""

    is_headquarters: bool | None = None
    """Whether the record represents the bank's headquarters."""

    branches: list[BranchSummary] = field(default_factory=list)
    """The branches sharing the headquarters' code prefix.
    Always empty for branch records.
    """

    def to_summary(self) -> BranchSummary:
        """Projects the record to a `BranchSummary`.

        Returns:
            The summary.
        """
        return BranchSummary(
            address=self.address,
            name=self.name,
            country_code=self.country_code,
            is_headquarters=self.is_headquarters,
            code=self.code,
        )


@dataclass
class CountryBankCollection:
    """All banks stored for a single country."""

    country_code: str
    """The ISO 3166-1 alpha-2 code of the country."""

    country_name: str
    """The uppercased name of the country."""

    banks: list[BranchSummary] = field(default_factory=list)
    """The headquarters and branches in the country, ordered by code."""

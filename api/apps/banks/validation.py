"""Decides whether a candidate bank record may be stored."""

# Application imports
from apps.banks import codes
from apps.banks.domain import BankRecord
from apps.banks.exceptions import BankRecordValidationError
from apps.countries.registry import CountryRegistry


class BankRecordValidator:
    """Validates bank records against the SWIFT code layout
    and a registry of recognized countries.
    """

    def __init__(self, registry: CountryRegistry) -> None:
        """Initializes a new instance of a `BankRecordValidator`.

        Args:
            registry: The lookup table of recognized countries.

        Returns:
            `None`
        """
        self._registry = registry

    def validate(self, record: BankRecord) -> None:
        """Checks a record, stopping at the first failed rule.

        Rules are evaluated in a fixed order so that a record with
        several defects always reports the same one. As part of the
        country name check, the record's `country_name` is converted
        to uppercase in place.

        Raises:
            `BankRecordValidationError` with a user-facing reason
                if the record is not admissible.

        Args:
            record: The record to validate.

        Returns:
            `None`
        """
        # Confirm required fields are present
        if record.address is None or not record.address.strip():
            raise BankRecordValidationError("address is required")

        if record.name is None or not record.name.strip():
            raise BankRecordValidationError("bankName is required")

        if record.country_code is None:
            raise BankRecordValidationError("countryISO2 is required")

        if record.country_name is None:
            raise BankRecordValidationError("countryName is required")

        if record.is_headquarters is None:
            raise BankRecordValidationError("isHeadquarter is required")

        if record.code is None:
            raise BankRecordValidationError("swiftCode is required")

        # Confirm country code and name agree with the registry
        canonical_name, found = self._registry.lookup_canonical_name(
            record.country_code
        )
        if not found:
            raise BankRecordValidationError("countryISO2 is invalid")

        record.country_name = record.country_name.upper()
        if record.country_name != canonical_name:
            raise BankRecordValidationError(
                "countryName does not match ISO2 code"
            )

        # Confirm code layout
        if not codes.is_consistent_with_country(
            record.code, record.country_code
        ) or not codes.is_well_formed(record.code):
            raise BankRecordValidationError("swiftCode is invalid")

        # Confirm headquarters flag agrees with branch suffix
        if codes.is_headquarters_code(record.code) and not record.is_headquarters:
            raise BankRecordValidationError(
                "swiftCode indicates bank's headquarter"
            )

        if record.is_headquarters and not codes.is_headquarters_code(record.code):
            raise BankRecordValidationError("swiftCode indicates bank's branch")

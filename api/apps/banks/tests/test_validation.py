"""Unit tests for the bank record validator."""

# Standard library imports
from dataclasses import replace

# Third-party imports
import pytest

# Application imports
from apps.banks.domain import BankRecord
from apps.banks.exceptions import BankRecordValidationError
from apps.banks.validation import BankRecordValidator
from apps.countries.registry import CountryRegistry


@pytest.fixture(scope="module")
def validator() -> BankRecordValidator:
    """A validator backed by the ISO 3166-1 registry."""
    return BankRecordValidator(CountryRegistry.from_iso3166())


@pytest.fixture()
def record() -> BankRecord:
    """A valid headquarters record."""
    return BankRecord(
        code="TESTPL33XXX",
        name="Test Bank",
        country_code="PL",
        country_name="Poland",
        address="ul. Testowa 1, Warszawa",
        is_headquarters=True,
    )


class TestRequiredFields:
    """Tests for presence checks."""

    def test_valid_record(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that a complete, consistent record passes."""
        assert validator.validate(record) is None

    @pytest.mark.parametrize(
        "changes, reason",
        [
            ({"address": None}, "address is required"),
            ({"address": ""}, "address is required"),
            ({"address": "   "}, "address is required"),
            ({"name": None}, "bankName is required"),
            ({"name": "\t\n"}, "bankName is required"),
            ({"country_code": None}, "countryISO2 is required"),
            ({"country_name": None}, "countryName is required"),
            ({"is_headquarters": None}, "isHeadquarter is required"),
            ({"code": None}, "swiftCode is required"),
        ],
    )
    def test_missing_field(
        self,
        validator: BankRecordValidator,
        record: BankRecord,
        changes: dict,
        reason: str,
    ) -> None:
        """Asserts that each missing field is reported by name."""
        with pytest.raises(BankRecordValidationError) as exc_info:
            validator.validate(replace(record, **changes))
        assert str(exc_info.value) == reason

    @pytest.mark.parametrize(
        "changes, reason",
        [
            (
                {"address": None, "name": None, "code": None},
                "address is required",
            ),
            ({"name": "", "country_code": None}, "bankName is required"),
            (
                {"country_code": None, "country_name": None},
                "countryISO2 is required",
            ),
            (
                {"country_name": None, "is_headquarters": None},
                "countryName is required",
            ),
            (
                {"is_headquarters": None, "code": None},
                "isHeadquarter is required",
            ),
            (
                {"country_code": "XX", "code": "invalid"},
                "countryISO2 is invalid",
            ),
        ],
    )
    def test_first_failure_is_reported(
        self,
        validator: BankRecordValidator,
        record: BankRecord,
        changes: dict,
        reason: str,
    ) -> None:
        """Asserts that rules are evaluated in a fixed order."""
        with pytest.raises(BankRecordValidationError) as exc_info:
            validator.validate(replace(record, **changes))
        assert str(exc_info.value) == reason

    def test_empty_country_code_is_present_but_invalid(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that an empty country code is not treated as absent."""
        with pytest.raises(BankRecordValidationError, match="^countryISO2 is invalid$"):
            validator.validate(replace(record, country_code=""))


class TestCountry:
    """Tests for country code and name checks."""

    @pytest.mark.parametrize("country_code", ["XX", "pl", "POL", "P"])
    def test_unrecognized_country_code(
        self,
        validator: BankRecordValidator,
        record: BankRecord,
        country_code: str,
    ) -> None:
        """Asserts that codes missing from the registry are rejected."""
        with pytest.raises(BankRecordValidationError, match="^countryISO2 is invalid$"):
            validator.validate(replace(record, country_code=country_code))

    def test_country_name_mismatch(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that a name belonging to another country is rejected."""
        record.country_name = "GERMANY"
        with pytest.raises(BankRecordValidationError) as exc_info:
            validator.validate(record)
        assert str(exc_info.value) == "countryName does not match ISO2 code"

    @pytest.mark.parametrize("country_name", ["poland", "POLAND", "PoLaNd"])
    def test_country_name_is_case_insensitive(
        self,
        validator: BankRecordValidator,
        record: BankRecord,
        country_name: str,
    ) -> None:
        """Asserts that the name is compared regardless of case."""
        validator.validate(replace(record, country_name=country_name))

    def test_country_name_is_uppercased(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that validation normalizes the record's country name."""
        validator.validate(record)
        assert record.country_name == "POLAND"

    def test_country_name_is_uppercased_before_mismatch(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that the normalization happens even when the name is wrong."""
        record.country_name = "germany"
        with pytest.raises(BankRecordValidationError):
            validator.validate(record)
        assert record.country_name == "GERMANY"


class TestSwiftCode:
    """Tests for code layout checks."""

    @pytest.mark.parametrize(
        "code",
        [
            "TESTDE33XXX",
            "TEST33PLXXX",
            "testpl33xxx",
            "TESTPL3",
            "TESTPL33XXXX",
            "TESTPL33-XX",
            "",
        ],
    )
    def test_invalid_code(
        self, validator: BankRecordValidator, record: BankRecord, code: str
    ) -> None:
        """Asserts that inconsistent and malformed codes share one reason."""
        with pytest.raises(BankRecordValidationError) as exc_info:
            validator.validate(replace(record, code=code))
        assert str(exc_info.value) == "swiftCode is invalid"

    def test_eight_character_code(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that a code without a branch suffix describes a branch."""
        validator.validate(replace(record, code="TESTPL33", is_headquarters=False))


class TestHeadquarters:
    """Tests for agreement between the headquarters flag and code suffix."""

    def test_headquarters_code_on_branch(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that an "XXX" code cannot describe a branch."""
        with pytest.raises(BankRecordValidationError) as exc_info:
            validator.validate(replace(record, is_headquarters=False))
        assert str(exc_info.value) == "swiftCode indicates bank's headquarter"

    def test_branch_code_on_headquarters(
        self, validator: BankRecordValidator, record: BankRecord
    ) -> None:
        """Asserts that a headquarters must carry the "XXX" suffix."""
        with pytest.raises(BankRecordValidationError) as exc_info:
            validator.validate(replace(record, code="TESTPL33ABC"))
        assert str(exc_info.value) == "swiftCode indicates bank's branch"

    @pytest.mark.parametrize(
        "code", ["TESTPL33XXX", "TESTPL33ABC", "TESTPL33", "BREXPLPWWAL"]
    )
    @pytest.mark.parametrize("is_headquarters", [True, False])
    def test_flag_agrees_with_suffix(
        self,
        validator: BankRecordValidator,
        record: BankRecord,
        code: str,
        is_headquarters: bool,
    ) -> None:
        """Asserts that validation succeeds exactly when the
        headquarters flag matches the "XXX" suffix.
        """
        candidate = replace(record, code=code, is_headquarters=is_headquarters)
        if is_headquarters == code.endswith("XXX"):
            validator.validate(candidate)
        else:
            with pytest.raises(BankRecordValidationError):
                validator.validate(candidate)

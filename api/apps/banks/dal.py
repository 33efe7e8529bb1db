"""Permits CRUD database operations for bank headquarters and branches."""

# Standard library imports
import logging

# Third-party imports
from django.db import DatabaseError, IntegrityError, transaction
from psycopg2 import errorcodes

# Application imports
from apps.banks import codes
from apps.banks.domain import BankRecord, CountryBankCollection
from apps.banks.exceptions import StorageError, SwiftCodeExistsError
from apps.banks.models import Bank

SQLITE_UNIQUE_ERROR_NAMES = {
    "SQLITE_CONSTRAINT_PRIMARYKEY",
    "SQLITE_CONSTRAINT_UNIQUE",
}


def is_unique_violation(error: IntegrityError) -> bool:
    """Determines whether an integrity error was caused by
    a duplicate value in a unique or primary key column.

    Prefers the structured error code exposed by the underlying
    driver (a PostgreSQL SQLSTATE or a SQLite extended error name).
    Falls back to matching the error text when neither is available,
    which depends on the wording of the database engine in use.

    Args:
        error: The error raised by Django's database layer.

    Returns:
        The boolean result.
    """
    cause = error.__cause__

    sqlstate = getattr(cause, "pgcode", None) or getattr(cause, "sqlstate", None)
    if sqlstate:
        return sqlstate == errorcodes.UNIQUE_VIOLATION

    sqlite_error_name = getattr(cause, "sqlite_errorname", None)
    if sqlite_error_name:
        return sqlite_error_name in SQLITE_UNIQUE_ERROR_NAMES

    message = str(error).lower()
    return "duplicate key" in message or "unique constraint" in message


class DatabaseClient:
    """A database client for bank records.

    Each operation runs as a single logical transaction
    against the table keyed by SWIFT code.
    """

    def __init__(self, logger: logging.Logger) -> None:
        """Initializes a new instance of a `DatabaseClient`.

        Args:
            logger: The logger.

        Returns:
            `None`
        """
        self._logger = logger

    def _to_record(self, bank: Bank) -> BankRecord:
        """Maps a database row to a domain record with no branches."""
        return BankRecord(
            code=bank.code,
            name=bank.name,
            country_code=bank.country_code,
            country_name=bank.country_name,
            address=bank.address,
            is_headquarters=bank.is_headquarters,
        )

    def fetch_by_code(self, code: str) -> BankRecord | None:
        """Fetches a bank by its exact SWIFT code.

        When the bank is a headquarters, a second query collects every
        non-headquarters record sharing its 8-character code prefix.

        Raises:
            `StorageError` if the query fails.

        Args:
            code: The SWIFT code.

        Returns:
            The record, or `None` if the code is not stored.
        """
        try:
            bank = Bank.objects.filter(code=code).first()
            if bank is None:
                self._logger.info(f'No bank found with SWIFT code "{code}".')
                return None

            record = self._to_record(bank)
            if not bank.is_headquarters:
                self._logger.debug(f'Found branch "{code}".')
                return record

            branches = (
                Bank.objects.filter(
                    code__startswith=codes.headquarters_prefix(bank.code),
                    is_headquarters=False,
                )
                .exclude(code=bank.code)
                .order_by("code")
            )
            record.branches = [self._to_record(b).to_summary() for b in branches]
        except DatabaseError as e:
            self._logger.error(f'Failed to fetch bank "{code}". {e}')
            raise StorageError(
                f"Failed to fetch bank from database. {e}"
            ) from None

        self._logger.debug(
            f'Found headquarters "{code}" with {len(record.branches)} branch(es).'
        )
        return record

    def fetch_by_country(self, country_code: str) -> CountryBankCollection | None:
        """Fetches all banks located in a country.

        A country without stored banks is reported the same way whether
        or not the code itself is recognized; country recognition is
        the responsibility of the caller.

        Raises:
            `StorageError` if the query fails.

        Args:
            country_code: The ISO 3166-1 alpha-2 country code.

        Returns:
            The collection, or `None` if no banks are stored for the country.
        """
        try:
            banks = list(
                Bank.objects.filter(country_code=country_code).order_by("code")
            )
        except DatabaseError as e:
            self._logger.error(
                f'Failed to fetch banks for country "{country_code}". {e}'
            )
            raise StorageError(
                f"Failed to fetch banks from database. {e}"
            ) from None

        if not banks:
            self._logger.info(f'No banks found for country "{country_code}".')
            return None

        self._logger.debug(
            f'Found {len(banks)} bank(s) for country "{country_code}".'
        )
        return CountryBankCollection(
            country_code=banks[0].country_code,
            country_name=banks[0].country_name,
            banks=[self._to_record(b).to_summary() for b in banks],
        )

    def insert(self, record: BankRecord) -> None:
        """Inserts a validated bank record.

        Raises:
            `SwiftCodeExistsError` if a record with the same code exists.
            `StorageError` if the insert fails for any other reason.

        Args:
            record: The record to insert.

        Returns:
            `None`
        """
        try:
            with transaction.atomic():
                Bank.objects.create(
                    code=record.code,
                    name=record.name,
                    address=record.address,
                    country_code=record.country_code,
                    country_name=record.country_name,
                    is_headquarters=record.is_headquarters,
                )
        except IntegrityError as e:
            if is_unique_violation(e):
                self._logger.info(f'Bank "{record.code}" already exists.')
                raise SwiftCodeExistsError() from None
            self._logger.error(f'Failed to insert bank "{record.code}". {e}')
            raise StorageError(f"Failed to insert bank into database. {e}") from None
        except DatabaseError as e:
            self._logger.error(f'Failed to insert bank "{record.code}". {e}')
            raise StorageError(f"Failed to insert bank into database. {e}") from None

        self._logger.info(f'Inserted bank "{record.code}".')

    def delete(self, code: str) -> bool:
        """Deletes a bank by its SWIFT code.

        Existence is checked before deleting so that a missing code can be
        told apart from a successful delete. Branches of a deleted
        headquarters are left in place.

        Raises:
            `StorageError` if the operation fails.

        Args:
            code: The SWIFT code.

        Returns:
            `True` if the bank was deleted, or `False` if it did not exist.
        """
        try:
            with transaction.atomic():
                if not Bank.objects.filter(code=code).exists():
                    self._logger.info(f'No bank found with SWIFT code "{code}".')
                    return False
                Bank.objects.filter(code=code).delete()
        except DatabaseError as e:
            self._logger.error(f'Failed to delete bank "{code}". {e}')
            raise StorageError(f"Failed to delete bank from database. {e}") from None

        self._logger.info(f'Deleted bank "{code}".')
        return True

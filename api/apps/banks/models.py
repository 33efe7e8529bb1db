"""Data models for bank headquarters and branches."""

# Third-party imports
from django.db import models


class Bank(models.Model):
    """Database model for a bank identified by its SWIFT/BIC code.

    Headquarters and branches live in the same table. A branch
    is associated with its headquarters by the shared 8-character
    code prefix rather than a foreign key.
    """

    class Meta:
        """Metadata for the model."""

        db_table = "banks_data"
        indexes = [
            models.Index(fields=["country_code"], name="idx_country_iso2"),
            models.Index(
                fields=["code"],
                name="idx_swift_code_pattern",
                opclasses=["varchar_pattern_ops"],
            ),
        ]

    code = models.CharField(
        db_column="swift_code",
        max_length=11,
        primary_key=True,
    )
    """The SWIFT/BIC code."""

    name = models.TextField(db_column="bank_name")
    """The name of the bank."""

    address = models.TextField(db_column="address")
    """The street address of the bank."""

    country_code = models.CharField(db_column="country_iso2", max_length=2)
    """The ISO 3166-1 alpha-2 code of the country."""

    country_name = models.TextField(db_column="country_name")
    """The uppercased name of the country."""

    is_headquarters = models.BooleanField(db_column="is_headquarter")
    """Whether the record represents the bank's headquarters."""

"""Serializers for bank headquarters, branches, and country listings."""

# Third-party imports
from rest_framework import serializers

# Application imports
from apps.banks.domain import BankRecord


class MessageSerializer(serializers.Serializer):
    """The envelope for status and error responses."""

    message = serializers.CharField()


class BranchSummarySerializer(serializers.Serializer):
    """A serializer for banks listed under a headquarters or a country."""

    address = serializers.CharField()
    bankName = serializers.CharField(source="name")
    countryISO2 = serializers.CharField(source="country_code")
    isHeadquarter = serializers.BooleanField(source="is_headquarters")
    swiftCode = serializers.CharField(source="code")


class BankRecordSerializer(serializers.Serializer):
    """A serializer for a single bank and, if it is a
    headquarters, its branches.
    """

    address = serializers.CharField()
    bankName = serializers.CharField(source="name")
    countryISO2 = serializers.CharField(source="country_code")
    countryName = serializers.CharField(source="country_name")
    isHeadquarter = serializers.BooleanField(source="is_headquarters")
    swiftCode = serializers.CharField(source="code")
    branches = BranchSummarySerializer(many=True)


class CountryBankCollectionSerializer(serializers.Serializer):
    """A serializer for all banks in a country."""

    countryISO2 = serializers.CharField(source="country_code")
    countryName = serializers.CharField(source="country_name")
    swiftCodes = BranchSummarySerializer(source="banks", many=True)


class StrictCharField(serializers.CharField):
    """A `CharField` that accepts JSON strings only. Numbers and
    booleans are rejected rather than converted to text.
    """

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictBooleanField(serializers.BooleanField):
    """A `BooleanField` that accepts JSON `true` and `false` only."""

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid", input=data)
        return data


class BankRecordCreateSerializer(serializers.Serializer):
    """Parses a request to add a bank.

    Every field is optional and nullable so that missing values
    reach the record validator, which reports them in a fixed order.
    Only the JSON types are enforced here, strictly: a number where
    text is expected, or a string where a boolean is, is a parse error.
    """

    address = StrictCharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    bankName = StrictCharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    countryISO2 = StrictCharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    countryName = StrictCharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    isHeadquarter = StrictBooleanField(required=False, allow_null=True)
    swiftCode = StrictCharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )

    def to_record(self) -> BankRecord:
        """Builds a bank record from the validated data.

        Returns:
            The record, with `None` in place of absent fields.
        """
        data = self.validated_data
        return BankRecord(
            code=data.get("swiftCode"),
            name=data.get("bankName"),
            country_code=data.get("countryISO2"),
            country_name=data.get("countryName"),
            address=data.get("address"),
            is_headquarters=data.get("isHeadquarter"),
        )

"""API views for SWIFT codes of bank headquarters and branches."""

# Third-party imports
from django.conf import settings
from django.http import JsonResponse
from drf_spectacular.utils import extend_schema
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.views import APIView

# Application imports
from apps.banks import codes
from apps.banks.dal import DatabaseClient
from apps.banks.exceptions import (
    BankRecordValidationError,
    StorageError,
    SwiftCodeExistsError,
)
from apps.banks.serializers import (
    BankRecordCreateSerializer,
    BankRecordSerializer,
    CountryBankCollectionSerializer,
    MessageSerializer,
)
from apps.banks.validation import BankRecordValidator
from apps.common.logger import LoggerFactory
from apps.countries.registry import CountryRegistry

SWIFT_CODE_NOT_FOUND = "Given Swift Code not found"
COUNTRY_NOT_FOUND = "Country with given ISO2 Code does not have any swift codes"

# Instantiate global variables
logger = LoggerFactory.get("BANKS", settings.LOG_LEVEL)
country_registry = CountryRegistry.from_iso3166()
validator = BankRecordValidator(country_registry)
db_client = DatabaseClient(logger)


def _message(message: str, status: int) -> JsonResponse:
    """Wraps a message in the standard response envelope."""
    return JsonResponse({"message": message}, status=status)


class SwiftCodeCreateApiView(APIView):
    """REST API operations for adding banks."""

    @extend_schema(
        request=BankRecordCreateSerializer,
        responses={
            200: MessageSerializer,
            400: MessageSerializer,
            409: MessageSerializer,
            500: MessageSerializer,
        },
    )
    def post(self, request: Request) -> JsonResponse:
        """Validates a bank record and inserts it into the database.

        Args:
            request: The Django REST Framework request object.

        Returns:
            A message confirming the insert or describing the failure.
        """
        # Parse request body
        try:
            serializer = BankRecordCreateSerializer(data=request.data)
        except ParseError:
            return _message("Error parsing request body", 400)
        if not serializer.is_valid():
            return _message("Error parsing request body", 400)
        record = serializer.to_record()

        # Validate record
        try:
            validator.validate(record)
        except BankRecordValidationError as e:
            return _message(str(e), 400)

        # Insert record
        try:
            db_client.insert(record)
        except SwiftCodeExistsError as e:
            return _message(str(e), 409)
        except StorageError as e:
            return _message(str(e), 500)

        return _message(
            f"Successfully added bank with swift code {record.code}", 200
        )


class SwiftCodeDetailApiView(APIView):
    """REST API operations for single banks."""

    @extend_schema(
        responses={
            200: BankRecordSerializer,
            400: MessageSerializer,
            404: MessageSerializer,
            500: MessageSerializer,
        }
    )
    def get(self, request: Request, swift_code: str) -> JsonResponse:
        """Retrieves a bank and, for a headquarters, its branches.

        Args:
            request: The Django REST Framework request object.

            swift_code: The SWIFT code from the URL path.

        Returns:
            The serialized bank, or a message describing the failure.
        """
        if not codes.is_well_formed(swift_code):
            return _message("swiftCode is invalid", 400)

        try:
            record = db_client.fetch_by_code(swift_code)
        except StorageError as e:
            return _message(str(e), 500)

        if record is None:
            return _message(SWIFT_CODE_NOT_FOUND, 404)

        return JsonResponse(BankRecordSerializer(record).data, status=200)

    @extend_schema(
        responses={
            200: MessageSerializer,
            400: MessageSerializer,
            404: MessageSerializer,
            500: MessageSerializer,
        }
    )
    def delete(self, request: Request, swift_code: str) -> JsonResponse:
        """Deletes a bank. Branches of a headquarters are kept.

        Args:
            request: The Django REST Framework request object.

            swift_code: The SWIFT code from the URL path.

        Returns:
            A message confirming the delete or describing the failure.
        """
        if not codes.is_well_formed(swift_code):
            return _message("swiftCode is invalid", 400)

        try:
            deleted = db_client.delete(swift_code)
        except StorageError as e:
            return _message(str(e), 500)

        if not deleted:
            return _message(SWIFT_CODE_NOT_FOUND, 404)

        return _message(f"Bank with swift code: {swift_code} has been deleted", 200)


class SwiftCodeCountryApiView(APIView):
    """REST API operations for the banks of a country."""

    @extend_schema(
        responses={
            200: CountryBankCollectionSerializer,
            400: MessageSerializer,
            404: MessageSerializer,
            500: MessageSerializer,
        }
    )
    def get(self, request: Request, country_code: str) -> JsonResponse:
        """Retrieves every headquarters and branch in a country.

        Args:
            request: The Django REST Framework request object.

            country_code: The ISO 3166-1 alpha-2 code from the URL path.

        Returns:
            The serialized collection, or a message describing the failure.
        """
        if country_code not in country_registry:
            return _message("country-iso-2code is invalid", 400)

        try:
            collection = db_client.fetch_by_country(country_code)
        except StorageError as e:
            return _message(str(e), 500)

        if collection is None:
            return _message(COUNTRY_NOT_FOUND, 404)

        return JsonResponse(
            CountryBankCollectionSerializer(collection).data, status=200
        )

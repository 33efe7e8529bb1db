"""Custom implementations of exception classes and handlers."""

# Third-party imports
from django.http import JsonResponse
from rest_framework.views import exception_handler


def custom_exception_handler(exc: Exception, context: dict) -> JsonResponse | None:
    """Handles exceptions raised by Django REST Framework by returning
    a response with the appropriate status code and the standard
    `{"message": ...}` envelope.

    References:
    - ["Custom Exception Handler in Django Rest Framework"](https://technostacks.com/blog/custom-exception-handler-in-django-rest-framework/)

    Args:
        exc: The exception object raised.

        context: A dictionary containing information about the current
            request and view that raised the exception. Contains the keys
            "view", "args", "kwargs", and "request" at the time of writing.

    Returns:
        The response object, or `None` to let Django handle exceptions
            the REST framework does not recognize.
    """
    # Pass to Django REST's default exception handler
    # to get standard error response
    response = exception_handler(exc, context)
    if response is None:
        return None

    # Pull error message from underlying exception detail, if available
    detail = getattr(exc, "detail", None)
    message = str(detail) if isinstance(detail, str) else str(exc)

    return JsonResponse(
        data={"message": message},
        status=response.status_code,
    )

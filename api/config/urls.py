"""Routes URLs to Django project views."""

# Third-party imports
from django.urls import path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView

# Application imports
from apps.banks.views import (
    SwiftCodeCountryApiView,
    SwiftCodeCreateApiView,
    SwiftCodeDetailApiView,
)

urlpatterns = [
    # SWIFT CODES
    path(
        "v1/swift-codes",
        SwiftCodeCreateApiView.as_view(),
        name="swift-code-create",
    ),
    path(
        "v1/swift-codes/country/<str:country_code>",
        SwiftCodeCountryApiView.as_view(),
        name="swift-code-country",
    ),
    path(
        "v1/swift-codes/<str:swift_code>",
        SwiftCodeDetailApiView.as_view(),
        name="swift-code-detail",
    ),

    # DOCUMENTATION
    path("v1/schema", SpectacularAPIView.as_view(), name="schema"),
    path(
        "v1/schema/redoc",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]

"""Settings for production deployments."""

# Standard library imports
import os

from .settings_base import *

try:
    SECRET_KEY = os.environ["DJANGO_SECRET_KEY"]
except KeyError:
    raise RuntimeError(
        'Missing required environment variable "DJANGO_SECRET_KEY".'
    ) from None

DEBUG = False

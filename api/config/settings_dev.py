"""Settings for local development against a PostgreSQL database."""

from .settings_base import *

DEBUG = True

ALLOWED_HOSTS = ["*"]

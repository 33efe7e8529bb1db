"""Selects the settings module for the current deployment environment.

The "ENV" environment variable chooses between "dev" (the default),
"prod" and "test". Any other value stops the project from starting.
"""

# Standard library imports
import os

ENV = os.getenv("ENV", "dev").lower()

if ENV == "dev":
    from .settings_dev import *
elif ENV == "prod":
    from .settings_prod import *
elif ENV == "test":
    from .settings_test import *
else:
    raise ValueError(
        f'Unsupported environment "{ENV}". Expected "dev", "prod" or "test".'
    )

#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

# Standard library imports
import os
import sys


def main() -> None:
    """Runs administrative tasks."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as e:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable?"
        ) from e
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()

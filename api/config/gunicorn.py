"""Gunicorn config file"""

# Standard library imports
import os

# Django WSGI application path in pattern MODULE_NAME:VARIABLE_NAME
wsgi_app = "config.wsgi:application"
# The granularity of Error log outputs
loglevel = os.getenv("LOG_LEVEL", "info").lower()
# The number of worker processes for handling requests
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
# The socket to bind
bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
# Write access and error info to console
accesslog = errorlog = "-"
# Set the timeout in seconds
timeout = 30
# Seconds to wait for in-flight requests on shutdown
graceful_timeout = 10

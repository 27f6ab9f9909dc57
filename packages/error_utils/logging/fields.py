"""Canonical logging field names.

Keeping names centralized keeps boundary records and the formatters in step.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Boundary classification fields.
BOUNDARY = "boundary"
ERROR_CODE = "error_code"
ERROR_CATEGORY = "error_category"
EXCEPTION_TYPE = "exception_type"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PAGE_SIZE_OPTIONS = (10, 25, 50, 100)
RECENT_ACTIVITY_LIMIT = 5
RATE_PRECISION = 2

DEFAULT_DEPARTMENT = "General"
UNKNOWN_EMPLOYEE_NAME = "Unknown"
UNKNOWN_EMPLOYEE_ID = "-"

DEFAULT_REQUEST_TIMEOUT = 20
EMAIL_DOMAIN = "company.com"

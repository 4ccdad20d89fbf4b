import os

SECRET_KEY = "test-secret"

ATTENDANCE_API = {
    "base_url": os.getenv("ATTENDANCE_API_URL", "http://attendance.test/api"),
    "timeout": 2,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

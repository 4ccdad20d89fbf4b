import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

ATTENDANCE_API = {
    "base_url": os.getenv("ATTENDANCE_API_URL", "http://localhost:5000/api"),
    "timeout": float(os.getenv("ATTENDANCE_API_TIMEOUT", "20")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ATTENDANCE_API = {
    "base_url": os.getenv("ATTENDANCE_API_URL", "https://employee-attendance-backend-1.onrender.com/api"),
    "timeout": float(os.getenv("ATTENDANCE_API_TIMEOUT", "20")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

"""
Application settings.
Values come from the environment, with defaults suitable for local development.
"""

import os


DATABASE_URL = os.environ.get("MYCAMP_DATABASE_URL", "sqlite:///./data/mycamp.db")

# JWT configuration
SECRET_KEY = os.environ.get("MYCAMP_SECRET_KEY", "dev-secret-key-change-in-production")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("MYCAMP_TOKEN_EXPIRE_MINUTES", 30))

LOG_LEVEL = os.environ.get("MYCAMP_LOG_LEVEL", "INFO").upper()

# Reservations may end at most this many calendar months from today
BOOKING_MONTHS = int(os.environ.get("MYCAMP_BOOKING_MONTHS", 2))

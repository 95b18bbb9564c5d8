import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


APP_NAME = os.getenv("APP_NAME", "ScholarMatch")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SCHOLARSHIP_DEFAULT_LIMIT = _int_env("SCHOLARSHIP_DEFAULT_LIMIT", 8)   # results page shows top 8
SCHOLARSHIP_MAX_LIMIT = _int_env("SCHOLARSHIP_MAX_LIMIT", 50)

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

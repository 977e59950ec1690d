import os
from dotenv import find_dotenv, load_dotenv

# load .env from the working directory of the host application
load_dotenv(dotenv_path=find_dotenv(usecwd=True))

# Transport defaults
BASE_URL = os.getenv("HTTPPLUS_BASE_URL", "")
TIMEOUT_MILLIS = int(os.getenv("HTTPPLUS_TIMEOUT_MILLIS", "30000"))
ENABLE_LOGGING = os.getenv("HTTPPLUS_ENABLE_LOGGING", "true").lower() == "true"

# Retry policy (server errors only, exponential backoff)
MAX_RETRIES = int(os.getenv("HTTPPLUS_MAX_RETRIES", "2"))
RETRY_BASE_DELAY = float(os.getenv("HTTPPLUS_RETRY_BASE_DELAY", "1.0"))
RETRY_MAX_DELAY = float(os.getenv("HTTPPLUS_RETRY_MAX_DELAY", "60.0"))

# Platform provider ("httpx" or "mock")
PLATFORM = os.getenv("HTTPPLUS_PLATFORM", "httpx")

LOG_LEVEL = os.getenv("HTTPPLUS_LOG_LEVEL", "INFO")


def validate_config():
    """Validate the environment-derived settings."""
    problems = []

    if TIMEOUT_MILLIS <= 0:
        problems.append(f"HTTPPLUS_TIMEOUT_MILLIS must be positive, got {TIMEOUT_MILLIS}")
    if MAX_RETRIES < 0:
        problems.append(f"HTTPPLUS_MAX_RETRIES must not be negative, got {MAX_RETRIES}")
    if RETRY_BASE_DELAY < 0:
        problems.append(f"HTTPPLUS_RETRY_BASE_DELAY must not be negative, got {RETRY_BASE_DELAY}")
    if RETRY_MAX_DELAY < RETRY_BASE_DELAY:
        problems.append(
            f"HTTPPLUS_RETRY_MAX_DELAY ({RETRY_MAX_DELAY}) must be >= "
            f"HTTPPLUS_RETRY_BASE_DELAY ({RETRY_BASE_DELAY})"
        )
    if BASE_URL and not BASE_URL.startswith(("http://", "https://")):
        problems.append(f"HTTPPLUS_BASE_URL must be an http(s) URL, got {BASE_URL!r}")

    if problems:
        raise ValueError(
            "Invalid httpplus configuration:\n" + "\n".join(problems) +
            "\nPlease check your environment variables or .env file."
        )

"""Default configuration constants for pytest-mailtrap."""

# Mailtrap API
DEFAULT_BASE_URL = "https://mailtrap.io/api/v1/"
API_TOKEN_HEADER = "Api-Token"

# HTTP settings (milliseconds)
DEFAULT_TIMEOUT_MS = 30_000

# Matcher settings
DEFAULT_WAIT_SECONDS = 5
DEFAULT_POLL_INTERVAL_MS = 500

# Field whose whitespace is ignored when matching
HTML_BODY_FIELD = "html_body"

"""LT-Signer System Constants"""

VERSION = "1.0.0"
APP_NAME = "LT-Signer"
DESCRIPTION = "Compute the LT-SIGNATURE header for a request body file"

# Header the receiving service reads the signature from
SIGNATURE_HEADER = "LT-SIGNATURE"

# Environment variables
ENV_SECRET = "HMAC_SECRET"
ENV_LOG_LEVEL = "LT_SIGNER_LOG_LEVEL"

# Local/test fallback only, never a production key
DEFAULT_SECRET = "my_super_secret_key"

# Logging configuration
LOG_LEVEL = "WARNING"

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1

USAGE = "Usage: lt-signer <path-to-body.json>"

# ipecho/config.py
import os

from dotenv import load_dotenv

load_dotenv()

# Fail fast on bad settings, uvicorn would only complain after import.

HOST = os.getenv("IPECHO_HOST", "0.0.0.0").strip()

# Names uvicorn understands; WARN is accepted as the stdlib alias.
LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")

LOG_LEVEL = os.getenv("IPECHO_LOG_LEVEL", "INFO").strip().lower()
if LOG_LEVEL == "warn":
    LOG_LEVEL = "warning"
if LOG_LEVEL not in LOG_LEVELS:
    raise RuntimeError(
        f"IPECHO_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {LOG_LEVEL!r}"
    )

_port = os.getenv("IPECHO_PORT", "8080").strip()
try:
    PORT = int(_port)
except ValueError:
    raise RuntimeError(f"IPECHO_PORT must be an integer, got {_port!r}") from None
if not 1 <= PORT <= 65535:
    raise RuntimeError(f"IPECHO_PORT must be between 1 and 65535, got {PORT}")

# Only accept forwarding header values that parse as a single IP on "/".
_TRUE = ("true", "1", "yes", "on")
_FALSE = ("false", "0", "no", "off")

_validate = os.getenv("IPECHO_VALIDATE_FORWARDED", "true").strip().lower()
if _validate not in _TRUE + _FALSE:
    raise RuntimeError(
        f"IPECHO_VALIDATE_FORWARDED must be true or false, got {_validate!r}"
    )
VALIDATE_FORWARDED = _validate in _TRUE

import os

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Raw payloads may carry share tokens, keep them out of logs unless asked.
LOG_DECODE_PAYLOADS = _env_flag("LOG_DECODE_PAYLOADS")

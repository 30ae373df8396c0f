# storefront/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _get_bool(env_name: str, default: bool) -> bool:
    val = os.getenv(env_name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


# chave anon publica da stack local (`supabase start`)
LOCAL_ANON_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJpc3MiOiJzdXBhYmFzZS1kZW1vIiwicm9sZSI6ImFub24iLCJleHAiOjE5ODM4MTI5OTZ9."
    "CRXP1A7WOeoJeXxjNni43kdQwgnWNReilDMblYTn_I0"
)

# painel do backend: Settings > API
SUPABASE_URL = os.getenv("SUPABASE_URL") or "http://localhost:54321"
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY") or LOCAL_ANON_KEY
BACKEND_TIMEOUT = float(os.getenv("BACKEND_TIMEOUT", 5))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_MASK_SECRETS = _get_bool("LOG_MASK_SECRETS", True)

PROBE_ON_STARTUP = _get_bool("PROBE_ON_STARTUP", True)
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", 8000))

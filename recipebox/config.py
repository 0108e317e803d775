import os

# ================================
# SUPABASE
# ================================
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")

# ================================
# YOUTUBE DATA API v3
# ================================
YOUTUBE_API_BASE = os.getenv("YOUTUBE_API_BASE", "https://www.googleapis.com/youtube/v3")
YOUTUBE_TIMEOUT = float(os.getenv("YOUTUBE_TIMEOUT", "10"))
DEFAULT_MAX_RESULTS = 12

# ================================
# SERVER
# ================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "10000"))


def youtube_api_key():
    """
    Read the key on every call so tests and long-running workers
    pick up changes to the environment.
    """
    return os.getenv("YOUTUBE_API_KEY", "")

"""
Configuration

Environment-driven settings shared by the proxy and the dashboard API.
"""
import os

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))  # voiceos/../

# Storage
DB_PATH = os.environ.get("VOS_DB_PATH", "voiceos.db")

# Upstream synthesis provider
TTS_UPSTREAM_URL = os.environ.get("VOS_TTS_UPSTREAM_URL", "https://edge-tts-g3en.onrender.com/tts")
TTS_TIMEOUT_SECONDS = float(os.environ.get("VOS_TTS_TIMEOUT", "120"))
DEFAULT_VOICE_ID = os.environ.get("VOS_DEFAULT_VOICE", "english_us_male")

# Identity provider tokens (HS256, e.g. Supabase auth)
JWT_SECRET_KEY = os.environ.get("VOS_JWT_SECRET", "voiceos-secret-key-change-in-production")
JWT_ALGORITHM = "HS256"
JWT_AUDIENCE = os.environ.get("VOS_JWT_AUDIENCE", "authenticated") or None

# Dashboard API
CORS_ORIGINS = [o.strip() for o in os.environ.get("VOS_CORS_ORIGINS", "*").split(",") if o.strip()]

# Logging / static files
LOG_FILE = os.environ.get("VOS_LOG_FILE", os.path.join(BACKEND_DIR, "voiceos.log"))
FRONTEND_DIST = os.environ.get("VOS_FRONTEND_DIST", None)

VERSION = "1.0.0"

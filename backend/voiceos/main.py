from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging
from logging.handlers import RotatingFileHandler
import os
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse

from voiceos.core.config import LOG_FILE, CORS_ORIGINS, FRONTEND_DIST, TTS_UPSTREAM_URL, VERSION

# ============================================================================
# Logging Configuration
# ============================================================================

# Create rotating file handler (10MB per file, keep 5 backups)
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding="utf-8"
)
file_handler.setLevel(logging.INFO)
file_handler.setFormatter(logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
))

# Also keep console output
console_handler = logging.StreamHandler()
console_handler.setLevel(logging.INFO)
console_handler.setFormatter(logging.Formatter(
    "%(asctime)s - %(levelname)s - %(message)s"
))

# Configure root logger
logging.basicConfig(
    level=logging.INFO,
    handlers=[file_handler, console_handler]
)

# Reduce noise from httpx
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)
logger.info(f"Logging to file: {LOG_FILE}")

from voiceos.core.database import create_db_and_tables
from voiceos.api import routes_proxy, routes_keys, routes_usage, routes_stats

app = FastAPI(
    title="VoiceOS API",
    description="Text-to-speech proxy and dashboard backend",
    version=VERSION
)

# Dashboard API lives in its own sub-application so its CORS middleware
# does not touch the proxy's fixed CORS contract.
api_app = FastAPI(
    title="VoiceOS Dashboard API",
    version=VERSION
)

api_app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "version": VERSION,
        "upstream": TTS_UPSTREAM_URL
    }


@app.on_event("startup")
async def on_startup():
    create_db_and_tables()
    logger.info(f"[Startup] Proxying synthesis to {TTS_UPSTREAM_URL}")

# TTS proxy (API key authentication, handled by the proxy itself)
app.include_router(routes_proxy.router, prefix="/functions/v1", tags=["TTS Proxy"])

# Dashboard APIs (identity-provider bearer tokens)
api_app.include_router(routes_keys.router, prefix="/keys", tags=["API Keys"])
api_app.include_router(routes_usage.router, tags=["Usage"])
api_app.include_router(routes_stats.router)

app.mount("/api", api_app)

# Serve frontend static files in production
# This avoids CORS issues and simplifies deployment
if FRONTEND_DIST and os.path.exists(FRONTEND_DIST):
    logger.info(f"Serving static files from: {FRONTEND_DIST}")
    # Mount assets directory
    app.mount("/assets", StaticFiles(directory=f"{FRONTEND_DIST}/assets"), name="assets")

    # SPA fallback: serve index.html for any other route
    @app.get("/{full_path:path}")
    async def serve_spa(full_path: str):
        # Don't catch API routes (they are already handled above)
        if full_path.startswith("api/") or full_path.startswith("functions/"):
            raise HTTPException(status_code=404, detail="API endpoint not found")

        index_path = f"{FRONTEND_DIST}/index.html"
        if os.path.exists(index_path):
            return FileResponse(index_path)
        raise HTTPException(status_code=404, detail="Frontend index.html not found")

if __name__ == "__main__":
    uvicorn.run("voiceos.main:app", host="0.0.0.0", port=8000, reload=True)

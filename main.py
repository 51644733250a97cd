""" main.py: FastAPI application entry point for the study assistant server.

This module builds the ASGI app, mounts the chat and health routers under /api, configures CORS so the
single-page chat UI can be served from another origin during development, and exposes a Prometheus
metrics endpoint. When executed directly, it starts a Uvicorn server using host/port values from
configuration.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app
import logging
from config import CONFIG
from version import __version__

# --- Router Imports ---
from api import chat as chat_router
from api import health as health_router

logger = logging.getLogger(__name__)

app = FastAPI(title="Study Assistant", version=__version__)

# Include routers
app.include_router(chat_router.router, prefix="/api", tags=["Chat"])
app.include_router(health_router.router, prefix="/api", tags=["Health"])

# Add Prometheus metrics endpoint
metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)

# Configure CORS
allow_origins = CONFIG.get('cors', {}).get('allow_origins', ["*"])
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if __name__ == '__main__':
    import uvicorn
    logger.info("[__main__] Starting Uvicorn server, backend: %s\n", CONFIG['assistant']['backend'])
    uvicorn.run(
        app,
        host=CONFIG.get('server', {}).get('host', '0.0.0.0'),
        port=CONFIG.get('server', {}).get('port', 8080)
    )

# Example request once the server is running:
# curl -X POST http://localhost:8080/api/chat -H 'Content-Type: application/json' \
#      -d '{"message": "explain derivatives", "history": []}'

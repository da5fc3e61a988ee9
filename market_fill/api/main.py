"""FastAPI application for market order allocation."""

import os

import uvicorn
from fastapi import FastAPI

from market_fill import __version__
from market_fill.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("MARKET_FILL_HOST", "0.0.0.0")
PORT = int(os.environ.get("MARKET_FILL_PORT", "8000"))
DEBUG = os.environ.get("MARKET_FILL_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Market Fill",
    description="Greedy market order allocation over 0x limit orders",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - MARKET_FILL_HOST: Host to bind to (default: 0.0.0.0)
    - MARKET_FILL_PORT: Port to bind to (default: 8000)
    - MARKET_FILL_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "market_fill.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

"""Entry point for running the API server: ``python -m api`` or ``bookmarks-api``."""
import os

import uvicorn


def main() -> None:
    """Serve api.main:app with uvicorn."""
    host = os.getenv("API_HOST", "0.0.0.0")
    # API_PORT for local dev, PORT for PaaS platforms
    port = int(os.getenv("API_PORT") or os.getenv("PORT") or "8000")

    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        log_level="info",
    )


if __name__ == "__main__":
    main()

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    """Serve the API with uvicorn (``python -m evstore`` or ``evstore-api``)."""
    uvicorn.run(
        "evstore.app:app",
        host=os.getenv("EVSTORE_HOST", "127.0.0.1"),
        port=int(os.getenv("EVSTORE_PORT", "8000")),
        log_level=os.getenv("EVSTORE_LOG_LEVEL", "info"),
    )


if __name__ == "__main__":
    main()

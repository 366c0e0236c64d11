"""
Run the portal service with uvicorn.

Usage:
    python -m portal_service
"""

import uvicorn

from .config import settings


def main() -> None:
    """Start uvicorn on the configured port."""
    uvicorn.run(
        "portal_service.app:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

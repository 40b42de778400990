"""pomo-auth entrypoint.

Run with:
  python -m pomoauth
"""

import os
import uvicorn

from pomoauth.config import TRUTHY, load_settings
from pomoauth.logging_config import get_logging_config


def main() -> None:
    # loads .env before HOST/PORT are read
    settings = load_settings()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() in TRUTHY
    uvicorn.run(
        "pomoauth.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=get_logging_config(settings.log_level),
    )


if __name__ == "__main__":
    main()

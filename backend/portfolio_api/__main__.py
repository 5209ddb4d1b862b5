"""Run the API with uvicorn: ``python -m portfolio_api``.

Host and port come from the ``HOST`` and ``PORT`` environment variables
(see ``portfolio_api.core.config``).
"""

from __future__ import annotations

import uvicorn

from portfolio_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "portfolio_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

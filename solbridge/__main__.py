"""Process entry point: `python -m solbridge` or the `solbridge-api` script.

A failure to bind the listening socket is fatal: uvicorn exits non-zero.
"""

import uvicorn

from solbridge.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "solbridge.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Run the API with uvicorn: ``python -m kinoprogram``."""

import uvicorn

from kinoprogram.config import settings


def main() -> None:
    uvicorn.run(
        "kinoprogram.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

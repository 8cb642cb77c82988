"""Run the API server: ``python -m metagate``."""

import uvicorn

from metagate.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "metagate.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Run the API with uvicorn: ``python -m buildezy``."""

import uvicorn

from buildezy.core.config import settings


def run() -> None:
    uvicorn.run("buildezy.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

from __future__ import annotations

"""Run the API with uvicorn: ``python -m statefacts``."""

import uvicorn

from statefacts.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("statefacts.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

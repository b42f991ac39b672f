"""Run the API with uvicorn: ``python -m ledger_api``."""

import uvicorn

from ledger_api.config import settings


def main() -> None:
    uvicorn.run("ledger_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

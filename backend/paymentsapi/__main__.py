"""
Payments API — Command Line Entry Point
=========================================

Runs the service under uvicorn:

    python -m paymentsapi
    paymentsapi

Host, port and log level come from the environment (HOST, PORT,
LOG_LEVEL); there are no command-line flags.
"""

import uvicorn

from paymentsapi.config import settings


def main() -> None:
    uvicorn.run(
        "paymentsapi.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

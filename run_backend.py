#!/usr/bin/env python
"""Script to run the task tracker API server."""
import uvicorn

from tasktracker.config import HOST, LOG_LEVEL, PORT
from tasktracker.logging_setup import setup_logging


def main() -> None:
    setup_logging()
    uvicorn.run(
        "tasktracker.main:app",
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

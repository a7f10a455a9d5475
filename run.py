#!/usr/bin/env python3
"""Run script for openhours."""

import logging

import uvicorn

from openhours.config import API_HOST, API_PORT, DEBUG

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)
    uvicorn.run(
        "openhours.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=DEBUG
    )

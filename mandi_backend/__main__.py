"""
/**
 * @file mandi_backend/__main__.py
 * @description `python -m mandi_backend`: resolve settings once and serve with uvicorn.
 */
"""

import logging

import uvicorn

from mandi_backend.config import load_settings
from mandi_backend.main import create_app


def main():
    settings = load_settings()
    app = create_app(settings)
    logging.getLogger("mandi_backend.main").info(f"Multilingual Mandi Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

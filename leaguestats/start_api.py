#!/usr/bin/env python3
"""
LeagueStats API Starter
Runs the read-only league statistics API
"""

import logging

import uvicorn

from leaguestats.app import application

logging.basicConfig(level=logging.INFO)


def main() -> None:
    application.start()
    logging.info(f"Starting LeagueStats API on {application.api_host}:{application.api_port}...")
    logging.info("  - League endpoints: /api/league/*")

    uvicorn.run(
        "leaguestats.interfaces.api.api_app:api_app",
        host=application.api_host,
        port=application.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()

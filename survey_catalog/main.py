"""
Entrypoint for the Survey Catalog API server.

This module exposes the FastAPI application instance for uvicorn.
Run the server with:
    uvicorn survey_catalog.main:app --reload
or with the console script:
    survey-catalog --port 3000
"""

import argparse
import logging
import os

import uvicorn

from survey_catalog.query.server import app

__all__ = ["app", "run"]


def run(argv=None):
    """Parse command-line options and serve the API with uvicorn."""
    parser = argparse.ArgumentParser(description="Serve the Survey Catalog GraphQL API")
    parser.add_argument("--host", default=os.getenv("SURVEY_CATALOG_HOST", "127.0.0.1"), help="Interface to bind")
    parser.add_argument("--port", type=int, default=int(os.getenv("SURVEY_CATALOG_PORT", "3000")), help="Port to listen on")
    parser.add_argument("--log-level", default=os.getenv("SURVEY_CATALOG_LOG_LEVEL", "INFO"), help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger(__name__).info(f"GraphiQL is now running on http://{args.host}:{args.port}/graphiql/")
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    run()

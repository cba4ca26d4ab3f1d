import argparse
import logging

import uvicorn

from .config import get_settings


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube search API")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 3000)")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    port = args.port if args.port is not None else get_settings().port

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("YouTube Search API running at: http://localhost:%d", port)
    logger.info("Search endpoint: /api/ytsearch?q=your-query")
    logger.info("Health check: /health")
    logger.info("API info: /")

    uvicorn.run("ytsearch_api.web.app:app", host=args.host, port=port, log_level=args.log_level)


if __name__ == "__main__":
    main()

import argparse
import logging

import uvicorn

from filetree.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="filetree-serve",
        description="Serve the file tree listing API.",
    )
    parser.add_argument("--host", default=settings.host, help="Interface to bind (HOST)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind (PORT)")
    parser.add_argument(
        "--reload",
        action=argparse.BooleanOptionalAction,
        default=settings.reload,
        help="Restart on code changes (RELOAD)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)
    logging.getLogger(__name__).info(
        f"Serving {settings.base_dir} on http://{args.host}:{args.port}"
    )
    uvicorn.run("filetree.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

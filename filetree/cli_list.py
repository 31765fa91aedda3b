import argparse
import json
import logging

from filetree.adapters.containers.dispatch_table import create_default_dispatch_table
from filetree.adapters.files.file_tree_adapter import LocalFileTreeAdapter
from filetree.adapters.types.type_classifier import create_default_classifier
from filetree.config.settings import settings
from filetree.exceptions import BaseAppError
from filetree.use_cases.files.list_tree import ListTreeUseCase


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="filetree-ls",
        description="List a directory of the file tree, entering zip archives on the way.",
    )
    parser.add_argument(
        "segments",
        nargs="*",
        help="Path segments relative to the base directory (none for the root)",
    )
    parser.add_argument(
        "--base-dir",
        default=settings.base_dir,
        help="Base directory (default: FILETREE_BASE_DIR or /)",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the listing as a JSON array"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log resolution steps to stderr"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger("filetree")

    file_tree = LocalFileTreeAdapter(
        args.base_dir,
        create_default_classifier(settings.sniff_bytes, logger),
        create_default_dispatch_table(logger),
        logger,
    )
    uc = ListTreeUseCase(file_tree, logger)

    try:
        files = uc.execute(list(args.segments))
    except BaseAppError as exc:
        print("Error:", exc)
        return 1

    if args.json:
        print(json.dumps([f.get_details() for f in files], ensure_ascii=False, indent=2))
    else:
        for f in files:
            print(f)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Remove a file or a whole directory tree."""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from os import PathLike
from typing import Union

__all__ = ["remove_path", "main"]

log = logging.getLogger(__name__)

PathType = Union[str, "PathLike[str]"]


def remove_path(target_path: PathType) -> bool:
    """Delete ``target_path`` recursively; return whether it was removed."""
    target = os.fspath(target_path)
    if not os.path.exists(target):
        log.error("path does not exist: %s", target)
        return False
    try:
        if os.path.isdir(target) and not os.path.islink(target):
            shutil.rmtree(target)
        else:
            os.remove(target)
    except OSError as exc:
        log.error("failed to delete the path: %s", exc)
        return False
    log.info("successfully deleted: %s", target)
    return True


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    logging.basicConfig(format="[%(levelname)s] :%(message)s", level=logging.INFO)
    parser = argparse.ArgumentParser(prog="rm", description="Remove a file or directory.")
    parser.add_argument("file", nargs="?", default="", help="filename")
    args = parser.parse_args(argv)
    remove_path(args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
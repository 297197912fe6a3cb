"""Command line entry point: validate one .cub map file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cubmap.elements import CubError
from cubmap.parser import parse_file


def has_cub_extension(filename: str) -> bool:
    """True for names of at least five characters ending in '.cub'."""
    return len(filename) >= 5 and filename.endswith(".cub")


def check_arguments(args: Sequence[str]) -> str:
    """Return the single .cub path in ``args``; raise ValueError otherwise."""
    args = list(args)
    if not args:
        raise ValueError("Please provide a .cub map to start playing.")
    if len(args) > 1:
        raise ValueError("Please provide only one .cub map to start playing.")
    path = args[0]
    if not has_cub_extension(path):
        raise ValueError("Please provide a valid file in '.cub' format.")
    return path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map named on the command line and return the exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        path = check_arguments(args)
    except ValueError as exc:
        print(exc)
        return 0
    try:
        parse_file(path)
    except OSError:
        print("Cannot open map file.")
        return 0
    except CubError as exc:
        print(exc)
        return 1
    except ValueError as exc:
        print(exc)
        return 0
    print("it worked!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
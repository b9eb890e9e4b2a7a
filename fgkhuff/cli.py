"""Command line entry point: compress or decompress a file."""

from __future__ import annotations

import sys
from contextlib import ExitStack

from .codec import FGKError, compress_stream, decompress_stream

_PROG = "fgkhuff"


def _usage(prog: str) -> int:
    """Report correct usage on stderr and return the failure exit status."""
    message = f"Usage: {prog} c|d input_file output_file"
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        return _usage(_PROG)
    mode, input_path, output_path = args

    with ExitStack() as stack:
        source = target = None
        error = None
        try:
            source = stack.enter_context(open(input_path, "rb"))
        except OSError as exc:
            error = exc
        try:
            target = stack.enter_context(open(output_path, "wb"))
        except OSError as exc:
            error = error or exc
        if error is not None:
            print(f"open: {error.strerror or error}", file=sys.stderr)
            return 1

        action = {"c": compress_stream, "d": decompress_stream}.get(mode[:1])
        if action is None:
            return _usage(_PROG)
        try:
            action(source, target)
        except FGKError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
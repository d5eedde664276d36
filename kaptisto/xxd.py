"""A small hex dumper producing xxd-style output."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

__all__ = ["XxdFormat", "Xxd", "hexdump", "read_raw_data", "save_to_file", "main"]

log = logging.getLogger(__name__)

BYTES_PER_ROW = 16

PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class XxdFormat:
    """Column layout of one dump row."""

    idx_col: int = 0

    @property
    def hex_cols(self) -> tuple[int, ...]:
        """Starting column of each byte's two hex digits."""
        base = self.idx_col + 8
        cols: list[int] = []
        for group in range(BYTES_PER_ROW // 2):
            cols.append(base + 2 + 5 * group)
            cols.append(base + 4 + 5 * group)
        return tuple(cols)

    @property
    def ascii_col(self) -> int:
        """Column where the printable-character column starts."""
        return self.hex_cols[-1] + 2 + 2

    @property
    def row_length(self) -> int:
        """Length of a full row, newline included."""
        return self.ascii_col + BYTES_PER_ROW + 1


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


@dataclass
class Xxd:
    """Formats a block of bytes as a hex dump."""

    raw_data: bytes
    upper_case: bool = False
    fmt: XxdFormat = field(default_factory=XxdFormat)
    result: str = field(default="", init=False)

    @property
    def row_count(self) -> int:
        return (len(self.raw_data) + BYTES_PER_ROW - 1) // BYTES_PER_ROW

    def _format_row(self, offset: int, chunk: bytes) -> str:
        cells = [" "] * self.fmt.ascii_col
        header = f"{offset:08x}: "
        start = self.fmt.idx_col
        cells[start:start + len(header)] = header
        hex_spec = "02X" if self.upper_case else "02x"
        for col, byte in zip(self.fmt.hex_cols, chunk):
            cells[col:col + 2] = format(byte, hex_spec)
        text = "".join(char for char in map(_printable, chunk))
        return "".join(cells) + text + "\n"

    def run(self) -> str:
        """Build the dump, store it in ``result`` and return it."""
        data = self.raw_data
        rows = (
            self._format_row(start, data[start:start + BYTES_PER_ROW])
            for start in range(0, len(data), BYTES_PER_ROW)
        )
        self.result = "".join(rows).rstrip(" ")
        return self.result


def hexdump(data: bytes, upper_case: bool = False) -> str:
    """Return the hex dump of ``data``."""
    return Xxd(bytes(data), upper_case).run()


def read_raw_data(filename: PathType) -> bytes:
    """Read a whole file as bytes."""
    with open(filename, "rb") as handle:
        return handle.read()


def save_to_file(filename: PathType, contents: str) -> None:
    """Write ``contents`` to ``filename``, replacing it."""
    with open(filename, "w", encoding="utf-8", newline="") as handle:
        handle.write(contents)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xxd", description="Make a hex dump of a file.")
    parser.add_argument("-u", dest="upcase", action="store_true",
                        help="use upper case hex letters.")
    parser.add_argument("infile", nargs="?", default="", help="Path to the input file")
    parser.add_argument("outfile", nargs="?", default="", help="Path to the output file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    logging.basicConfig(format="[%(levelname)s] :%(message)s")
    args = _build_parser().parse_args(argv)
    if not args.infile:
        return 0
    try:
        result = hexdump(read_raw_data(args.infile), args.upcase)
        if args.outfile:
            save_to_file(args.outfile, result)
        else:
            sys.stdout.write(result)
    except OSError as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
from __future__ import annotations

import argparse
import json
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import IO, Iterable, List, Optional

# ---- sys.path bootstrap (Windows-friendly) ----
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
# ---------------------------------------------

from fldserde.core.codec.line_codec import LineCodec  # noqa: E402
from fldserde.core.errors import SerDeConfigError  # noqa: E402


def _strip_eol(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def decode_stream(codec: LineCodec, src: Iterable[str], dst: IO[str]) -> int:
    matched = 0
    for line in src:
        row = codec.decode_line(_strip_eol(line))
        if row is None:
            continue
        dst.write(json.dumps(row, ensure_ascii=False) + "\n")
        matched += 1
    return matched


def encode_stream(codec: LineCodec, src: Iterable[str], dst: IO[str]) -> int:
    written = 0
    for n, line in enumerate(src, start=1):
        if not line.strip():
            continue
        try:
            values = json.loads(line)
        except json.JSONDecodeError as exc:
            raise SerDeConfigError(f"line {n}: not a JSON array: {exc}") from exc
        if not isinstance(values, list):
            raise SerDeConfigError(f"line {n}: expected a JSON array, got {type(values).__name__}")
        out = codec.encode_row(values)
        # A trailing rest-of-line column already ends the line.
        dst.write(out if out.endswith("\n") else out + "\n")
        written += 1
    return written


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Convert fixed length / delimited lines to JSON rows and back")
    ap.add_argument("mode", choices=("decode", "encode"))
    ap.add_argument("--format", required=True, help="Format string, e.g. FL2#FL10#DM|#DM,#FL20")
    ap.add_argument("--columns", type=int, required=True, help="Number of columns")
    ap.add_argument("--separator", default="#", help="Separator between column formats (default #)")
    ap.add_argument("--lenient", action="store_true", help="Keep rows that run out of input, with nulls")
    ap.add_argument("--input", default=None, help="Input path (default stdin)")
    ap.add_argument("--output", default=None, help="Output path (default stdout)")
    args = ap.parse_args(argv)

    try:
        codec = LineCodec.initialize(args.format, args.separator, args.columns, strict=not args.lenient)
    except SerDeConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        with ExitStack() as stack:
            src = stack.enter_context(open(args.input, "r", encoding="utf-8", newline="")) if args.input else sys.stdin
            dst = stack.enter_context(open(args.output, "w", encoding="utf-8", newline="")) if args.output else sys.stdout
            if args.mode == "decode":
                matched = decode_stream(codec, src, dst)
                print(f"decoded={matched} unmatched={codec.unmatched_count}", file=sys.stderr)
            else:
                written = encode_stream(codec, src, dst)
                print(f"encoded={written}", file=sys.stderr)
    except (SerDeConfigError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
import argparse
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional

import yaml

from srtformat.config_loader import load_effective_config
from srtformat.errors import SrtFormatError, SrtIOError
from srtformat.formatter import format_srt
from srtformat.logging_helper import LEVELS, bind_stream, log_debug, log_error, log_info, set_log_level


class _ArgumentParser(argparse.ArgumentParser):
    """argparse with usage errors mapped to exit status 1, like every other failure."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(
        prog="srtformat",
        usage="srtformat [options] <input.srt>",
        description=(
            "Normalize a SubRip (.srt) file: detect UTF-8/UTF-16/GB18030/Big5 input, "
            "canonicalize timestamps, renumber cues and merge adjacent duplicates. "
            "Writes UTF-8 SRT to stdout unless --save is given."
        ),
    )
    ap.add_argument("input", nargs="?", help="Path to the .srt file")
    ap.add_argument("--save", action="store_true", help="Save formatted srt instead of printing out (rewrites the input file)")
    ap.add_argument("--no-merge", dest="merge", action="store_false", default=None, help="Do not merge adjacent cues with identical text")
    ap.add_argument("--config", default=None, help="Path to a YAML file overriding the shipped defaults")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging")
    ap.add_argument("--trace", action="store_true", help="Enable trace logging: every merge decision and the decoded input head")
    ap.add_argument("--log-level", default=None, choices=sorted(LEVELS), help="Explicit log level")
    return ap


def resolve_settings(cfg: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Effective settings: CLI flags > config file(s)."""
    cfg_level = None
    if isinstance(cfg.get("logging"), dict):
        cfg_level = (cfg.get("logging", {}).get("level") or "").strip().lower()
    level = cfg_level if cfg_level in LEVELS else "info"
    if args.log_level:
        level = args.log_level
    if args.debug:
        level = "debug"
    if args.trace:
        level = "trace"

    coalesce = bool(cfg.get("coalesce_duplicates", True))
    if args.merge is not None:
        coalesce = args.merge

    charset_cfg = cfg.get("charset", {}) if isinstance(cfg.get("charset"), dict) else {}
    try:
        min_confidence = float(charset_cfg.get("min_confidence", 0.0) or 0.0)
    except (TypeError, ValueError):
        raise ValueError(f"charset.min_confidence must be a number, got {charset_cfg.get('min_confidence')!r}") from None

    return {
        "level": level,
        "coalesce": coalesce,
        "min_confidence": min_confidence,
    }


def read_input(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise SrtIOError(f"cannot read {path}: {e}") from e


def write_output(path: Optional[Path], data: bytes) -> None:
    """Write to `path` (truncating it) or to stdout when path is None."""
    try:
        if path is None:
            sys.stdout.buffer.write(data)
            sys.stdout.buffer.flush()
        else:
            path.write_bytes(data)
    except OSError as e:
        raise SrtIOError(f"cannot write {path or '<stdout>'}: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    # log records follow whatever sys.stderr is for this run
    previous = bind_stream(sys.stderr)
    try:
        return _run(argv)
    finally:
        bind_stream(previous)


def _run(argv: Optional[List[str]]) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not args.input:
        ap.print_help(sys.stderr)
        return 1

    try:
        cfg, has_local = load_effective_config(Path(args.config) if args.config else None)
        settings = resolve_settings(cfg, args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR: invalid configuration: {e}", file=sys.stderr)
        return 1

    set_log_level(settings["level"])
    debug = settings["level"] in ("debug", "trace")
    log_debug(
        f"Settings -> level={settings['level']}, coalesce={settings['coalesce']}, "
        f"min_confidence={settings['min_confidence']}, local_config={has_local}"
    )

    in_path = Path(args.input)
    try:
        data = read_input(in_path)
        result = format_srt(
            data,
            coalesce=settings["coalesce"],
            min_confidence=settings["min_confidence"],
        )
        if args.save:
            log_info(f"Saving {result.emitted} cue(s) to {in_path}")
            write_output(in_path, result.output)
        else:
            write_output(None, result.output)
    except SrtFormatError as e:
        log_error(str(e))
        if debug:
            traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

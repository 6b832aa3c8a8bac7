#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from srtformat.config_loader import deep_merge, load_default_and_local

Finding = Dict[str, Any]


def _dump(value: Any, flow: bool = True) -> str:
    return yaml.safe_dump(value, default_flow_style=flow, sort_keys=True, allow_unicode=True).strip()


def _format_value(value: Any) -> str:
    return _dump(value) if isinstance(value, (dict, list)) else repr(value)


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, dict):
        return "dict"
    if isinstance(value, list):
        return "list"
    return type(value).__name__


def _leaves(value: Any, path: Tuple[str, ...]) -> List[Tuple[str, Any]]:
    if isinstance(value, dict) and value:
        out: List[Tuple[str, Any]] = []
        for key, child in value.items():
            out.extend(_leaves(child, path + (str(key),)))
        return out
    return [(".".join(path), value)]


def collect_findings(default_cfg: Dict[str, Any], local_cfg: Dict[str, Any]) -> Dict[str, List[Finding]]:
    """Compare the local override against the shipped defaults.

    Keys only the local file has are stale: nothing reads them.
    """
    found: Dict[str, List[Finding]] = {"overrides": [], "stale_local_only": [], "type_warnings": []}

    def walk(dv: Any, lv: Any, path: Tuple[str, ...]) -> None:
        dotted = ".".join(path)
        if isinstance(dv, dict) and isinstance(lv, dict):
            for key in sorted(set(dv) | set(lv), key=str):
                child = path + (str(key),)
                if key not in lv:
                    continue
                if key not in dv:
                    for leaf, value in _leaves(lv[key], child):
                        found["stale_local_only"].append({"path": leaf, "value": value})
                    continue
                walk(dv[key], lv[key], child)
            return
        if dv != lv:
            found["overrides"].append({"path": dotted, "from": dv, "to": lv})
        if _kind(dv) != _kind(lv):
            found["type_warnings"].append({"path": dotted, "default_type": _kind(dv), "local_type": _kind(lv)})

    walk(default_cfg, local_cfg, tuple())
    return found


def _print_section(title: str, lines: List[str]) -> None:
    print(f"{title}:")
    if not lines:
        print("  (none)")
        return
    for line in lines:
        print(f"  {line}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="srtformat-config",
        description="Inspect the shipped srtformat defaults vs a local srtformat.yaml.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="report",
        choices=["report", "effective"],
        help="report (default) or effective",
    )
    parser.add_argument("--config", default=None, help="Local override file (default: ./srtformat.yaml)")
    parser.add_argument("--json", action="store_true", help="Emit JSON output (report or effective)")
    args = parser.parse_args(argv)

    try:
        default_cfg, local_cfg, has_local = load_default_and_local(Path(args.config) if args.config else None)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"FATAL: {exc}", file=sys.stderr)
        return 2

    effective_cfg = deep_merge(default_cfg, local_cfg)

    if args.command == "effective":
        if args.json:
            print(json.dumps({"effective_config": effective_cfg}, indent=2, ensure_ascii=False, default=str))
        else:
            print(_dump(effective_cfg, flow=False))
        return 0

    found = collect_findings(default_cfg, local_cfg)
    warn_count = len(found["stale_local_only"]) + len(found["type_warnings"])

    if args.json:
        payload = {"has_local_config": has_local, **found, "effective_config": effective_cfg}
        print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
        return 1 if warn_count else 0

    if not has_local:
        print("WARNING: srtformat.yaml not found; using only the shipped defaults")

    _print_section(
        "Overrides report",
        [f'changed: {f["path"]}: {_format_value(f["from"])} -> {_format_value(f["to"])}' for f in found["overrides"]],
    )
    _print_section(
        "Stale local keys",
        [f'WARNING stale(local): {f["path"]} = {_format_value(f["value"])}' for f in found["stale_local_only"]],
    )
    _print_section(
        "Type compatibility warnings",
        [
            f'WARNING type-mismatch: {f["path"]} default={f["default_type"]} local={f["local_type"]}'
            for f in found["type_warnings"]
        ],
    )
    print("\nEffective config:")
    print(_dump(effective_cfg, flow=False))
    return 1 if warn_count else 0


if __name__ == "__main__":
    sys.exit(main())

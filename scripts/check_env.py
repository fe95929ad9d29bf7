#!/usr/bin/env python3
from __future__ import annotations

import argparse
import importlib
from pathlib import Path
from typing import List, Tuple


DEFAULT_MODULES = ["yaml", "tqdm", "wcmatch"]

# (pattern, key, expected) samples the selector must get right
GLOB_SAMPLES = [
    ("**/*.md", "one/one.md", True),
    ("**/*.md", ".drafts/one.md", False),
    ("**/*.{md,html}", "two/two.html", True),
    ("**/*.+(md|html)", "two/two.html", True),
    ("!**/*.md", "two/clip.mp4", True),
]


def _check_module(name: str) -> Tuple[bool, str]:
    try:
        module = importlib.import_module(name)
        ver = getattr(module, "__version__", "unknown")
        return True, f"{name}: ok ({ver})"
    except ImportError as exc:
        return False, f"{name}: missing ({exc})"


def _check_glob() -> Tuple[bool, str]:
    from site_videos.matching import get_matching_files

    wrong = [
        pattern
        for pattern, key, expected in GLOB_SAMPLES
        if bool(get_matching_files({key: {}}, pattern)) != expected
    ]
    if wrong:
        return False, f"glob: unexpected results for {', '.join(wrong)}"
    return True, f"glob: ok ({len(GLOB_SAMPLES)} samples)"


def _check_source(source: Path, videos_directory: str) -> Tuple[bool, str]:
    if not source.is_dir():
        return False, f"source: {source} is not a directory"
    found = sum(1 for p in source.rglob(videos_directory) if p.is_dir())
    return True, f"source: ok ({found} '{videos_directory}' directories under {source})"


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Environment preflight check")
    parser.add_argument(
        "--require",
        type=str,
        default=",".join(DEFAULT_MODULES),
        help="Comma-separated required modules",
    )
    parser.add_argument("--source", type=str, default=None, help="Also check a site source directory")
    parser.add_argument("--videos-directory", type=str, default="videos", help="Videos folder name to count")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    required = [m.strip() for m in args.require.split(",") if m.strip()]
    failures = 0
    for module_name in required:
        ok, msg = _check_module(module_name)
        print(msg)
        failures += 0 if ok else 1

    if "wcmatch" in required and not failures:
        ok, msg = _check_glob()
        print(msg)
        failures += 0 if ok else 1

    if args.source:
        ok, msg = _check_source(Path(args.source).expanduser(), args.videos_directory)
        print(msg)
        failures += 0 if ok else 1

    if failures:
        print(f"env check failed: {failures} requirement(s) missing")
        return 1
    print("env check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

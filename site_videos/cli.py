from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, TextIO

from .config import VideosOptions, load_options, normalize_options
from .plugin import VideosStageError, videos
from .site import Site

log = logging.getLogger(__name__)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Attach sibling videos directories to matching source files")
    parser.add_argument("--directory", type=str, default=".", help="Site directory (default: cwd)")
    parser.add_argument("--source", type=str, default="src", help="Source folder inside the site directory")
    parser.add_argument("--config", type=str, default=None, help="YAML file with one or more option mappings")
    parser.add_argument("--pattern", type=str, default=None, help="Glob selecting the files to enrich")
    parser.add_argument("--videos-directory", type=str, default=None, help="Sibling directory holding videos")
    parser.add_argument(
        "--authorized-ext",
        action="append",
        default=None,
        help="Allowed video extension, repeatable (replaces the defaults)",
    )
    parser.add_argument("--videos-key", type=str, default=None, help="Metadata key receiving the paths")
    parser.add_argument("--output", type=str, default=None, help="Write the JSONL manifest here (default: stdout)")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Log per-file decisions")
    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if args.pattern is not None:
        out["pattern"] = args.pattern
    if args.videos_directory is not None:
        out["videos_directory"] = args.videos_directory
    if args.authorized_ext:
        out["authorized_exts"] = tuple(args.authorized_ext)
    if args.videos_key is not None:
        out["videos_key"] = args.videos_key
    return out


def resolve_options(args: argparse.Namespace) -> List[VideosOptions]:
    options = load_options(Path(args.config).expanduser()) if args.config else [normalize_options()]
    overrides = _overrides(args)
    return [replace(opt, **overrides) for opt in options]


def write_manifest(files: Dict[str, Dict[str, Any]], keys: Iterable[str], fp: TextIO) -> int:
    keys = list(dict.fromkeys(keys))
    written = 0
    for path, record in files.items():
        payload = {key: record[key] for key in keys if key in record}
        if not payload:
            continue
        fp.write(json.dumps({"path": path, **payload}) + "\n")
        written += 1
    return written


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(message)s",
    )
    options = resolve_options(args)
    site = Site(args.directory, source=args.source, progress=not args.no_progress)
    site.use(videos(options))
    try:
        files = site.build()
    except VideosStageError as exc:
        log.error("%s", exc)
        return 1

    keys = [opt.videos_key for opt in options]
    if args.output:
        out_path = Path(args.output).expanduser()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            written = write_manifest(files, keys, f)
        log.info("Wrote %d records to %s", written, out_path)
    else:
        write_manifest(files, keys, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

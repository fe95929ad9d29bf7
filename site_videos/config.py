from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from .io import DEFAULT_AUTHORIZED_EXTS


@dataclass(frozen=True)
class VideosOptions:
    pattern: str = "**/*.md"
    videos_directory: str = "videos"  # looked up next to each matching file
    authorized_exts: Tuple[str, ...] = DEFAULT_AUTHORIZED_EXTS
    videos_key: str = "videos"  # record field receiving the paths


DEFAULT_OPTIONS = VideosOptions()

# external (camelCase) option names -> dataclass fields
_ALIASES = {
    "pattern": "pattern",
    "videosDirectory": "videos_directory",
    "authorizedExts": "authorized_exts",
    "videosKey": "videos_key",
}
_FIELDS = {f.name for f in fields(VideosOptions)}


def _to_fields(raw: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in _FIELDS:
            raise TypeError(f"Unknown videos option: {key}")
        if name == "authorized_exts" and isinstance(value, list):
            value = tuple(value)
        out[name] = value
    return out


def normalize_options(options: VideosOptions | Mapping[str, Any] | None = None) -> VideosOptions:
    """Merge a partial configuration over ``DEFAULT_OPTIONS``.

    Every field is defaulted independently. Values are not validated: a bad
    pattern only fails once it reaches the matcher.
    """
    if options is None:
        return replace(DEFAULT_OPTIONS)
    if isinstance(options, VideosOptions):
        return replace(options)
    return replace(DEFAULT_OPTIONS, **_to_fields(options))


def expand_options(options: Any) -> List[VideosOptions]:
    if options is None:
        return [normalize_options()]
    if isinstance(options, (VideosOptions, Mapping)):
        return [normalize_options(options)]
    if isinstance(options, (list, tuple)):
        return [normalize_options(item) for item in options]
    raise TypeError(f"videos options must be a mapping or a list of mappings, got {type(options).__name__}")


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_options(path: Path) -> List[VideosOptions]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"options file not found: {path}")
    raw = _load_yaml(path)
    if raw is None:
        return [normalize_options()]
    if isinstance(raw, Mapping):
        return [normalize_options(raw)]
    if isinstance(raw, list) and all(isinstance(item, Mapping) for item in raw):
        return [normalize_options(item) for item in raw]
    raise ValueError(f"{path}: expected a mapping or a list of mappings of options")

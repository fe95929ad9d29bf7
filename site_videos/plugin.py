from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, MutableMapping, Optional, Protocol

from .config import VideosOptions, expand_options, normalize_options
from .io import is_authorized_file, list_directory
from .matching import get_matching_files

log = logging.getLogger(__name__)

FileMap = MutableMapping[str, MutableMapping[str, Any]]
Done = Callable[[Optional[BaseException]], None]


class BuildContext(Protocol):
    def source(self) -> str | os.PathLike: ...


class VideosStageError(RuntimeError):
    def __init__(self, file: str, directory: Path, cause: OSError) -> None:
        super().__init__(f"Cannot list videos directory {directory} for {file}: {cause}")
        self.file = file
        self.directory = directory


def add_videos_to_files(files: FileMap, context: BuildContext, options: VideosOptions) -> int:
    """Apply one configuration to ``files`` in place.

    Returns the number of records that had a videos directory.
    """
    options = normalize_options(options)
    matching = get_matching_files(files, options.pattern)
    source_root = Path(context.source())
    enriched = 0

    for file in matching:
        if file not in files:
            continue
        record = files[file]
        videos_path = source_root / os.path.dirname(file) / options.videos_directory
        if not videos_path.is_dir():
            log.debug("No %s directory for %s", options.videos_directory, file)
            continue
        try:
            entries = list_directory(videos_path)
        except OSError as exc:
            log.error("Listing %s failed: %s", videos_path, exc)
            raise VideosStageError(file, videos_path, exc) from exc

        found = record.setdefault(options.videos_key, [])
        for entry in entries:
            if is_authorized_file(entry, options.authorized_exts):
                found.append(os.path.join(record["path"].dir, options.videos_directory, entry))
        found[:] = list(dict.fromkeys(found))
        enriched += 1
        log.debug("%s: %d entries under %s", file, len(found), options.videos_key)

    log.info(
        "videos: pattern=%s matched=%d enriched=%d key=%s",
        options.pattern,
        len(matching),
        enriched,
        options.videos_key,
    )
    return enriched


def videos(options: Any = None) -> Callable[..., None]:
    """Build the stage for one configuration or a list of configurations.

    The stage calls ``done`` once every configuration has been applied, with
    ``None`` or with the error that stopped it. Without ``done`` it raises.
    """
    options_list = expand_options(options)

    def stage(files: FileMap, context: BuildContext, done: Optional[Done] = None) -> None:
        try:
            for item in options_list:
                add_videos_to_files(files, context, item)
        except VideosStageError as exc:
            if done is None:
                raise
            done(exc)
            return
        if done is not None:
            done(None)

    return stage

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

from tqdm import tqdm

log = logging.getLogger(__name__)

Stage = Callable[..., None]


def _walk_files(root: Path) -> Iterable[Path]:
    for path in sorted(root.rglob("*")):
        if path.is_file():
            yield path


class Site:
    """Minimal build host: reads a source tree into a file map and runs stages."""

    def __init__(self, directory: str | Path, source: str = "src", progress: bool = True) -> None:
        self.directory = Path(directory).expanduser().resolve()
        self._source = source
        self.progress = progress
        self.stages: List[Stage] = []

    def source(self) -> Path:
        return self.directory / self._source

    def use(self, stage: Stage) -> "Site":
        self.stages.append(stage)
        return self

    def read(self) -> Dict[str, Dict[str, Any]]:
        root = self.source()
        if not root.is_dir():
            raise FileNotFoundError(f"source directory not found: {root}")
        files: Dict[str, Dict[str, Any]] = {}
        for path in tqdm(list(_walk_files(root)), desc="Reading source", unit="file", disable=not self.progress):
            stat = path.stat()
            files[path.relative_to(root).as_posix()] = {"size": stat.st_size, "mtime": stat.st_mtime}
        log.info("Read %d files from %s", len(files), root)
        return files

    def build(self) -> Dict[str, Dict[str, Any]]:
        files = self.read()
        for stage in self.stages:
            errors: List[Optional[BaseException]] = []
            stage(files, self, errors.append)
            if not errors:
                raise RuntimeError(f"stage {getattr(stage, '__name__', stage)!r} never signalled completion")
            if errors[0] is not None:
                raise errors[0]
        return files

import os
from pathlib import Path
from typing import Collection, List


DEFAULT_AUTHORIZED_EXTS = ("mp4", "MP4", "ogg", "OGG", "webm", "WEBM")


def is_authorized_file(name: str, authorized_exts: Collection[str]) -> bool:
    # no dot: the whole name is treated as the extension
    extension = name.rsplit(".", 1)[-1]
    return extension in authorized_exts


def list_directory(path: Path) -> List[str]:
    """Immediate entries of ``path``, sorted by name. OSError propagates."""
    return sorted(os.listdir(path))

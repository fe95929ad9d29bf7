from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, List, MutableMapping

from wcmatch import glob

# same defaults as minimatch
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.NEGATE | glob.NEGATEALL


@dataclass(frozen=True)
class ParsedPath:
    """Components of a relative file key, as ``path.parse`` splits them."""

    root: str
    dir: str
    base: str
    ext: str
    name: str


def parse_path(file: str) -> ParsedPath:
    directory, base = os.path.split(file)
    name, ext = os.path.splitext(base)
    root = os.sep if file.startswith(os.sep) else ""
    return ParsedPath(root=root, dir=directory, base=base, ext=ext, name=name)


def get_matching_files(files: MutableMapping[str, MutableMapping[str, Any]], pattern: str) -> List[str]:
    matching: List[str] = []
    for file in list(files):
        # parsed for every record, matched or not
        files[file]["path"] = parse_path(file)
        if glob.globmatch(file, pattern, flags=GLOB_FLAGS):
            matching.append(file)
    return matching

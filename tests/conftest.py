from pathlib import Path

import pytest

LAYOUT = {
    "one/one.md": "",
    "one/videos/blockbuster.mp4": "",
    "one/videos/blockbuster.ogg": "",
    "one/videos/thumb.jpg": "",
    "two/two.md": "",
    "two/videos/movie.mp4": "",
    "two/videos/movie.ogg": "",
    "three/three.md": "",
    "three/videos/ad.webm": "",
    "four/four.md": "",
    "projects/hello/world.md": "",
    "projects/hello/videos/simon.ogg": "",
}


class FakeContext:
    def __init__(self, root: Path):
        self.root = root

    def source(self):
        return self.root


@pytest.fixture
def site_tree(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    for rel, content in LAYOUT.items():
        path = src / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return tmp_path


@pytest.fixture
def context(site_tree: Path) -> FakeContext:
    return FakeContext(site_tree / "src")


@pytest.fixture
def markdown_files():
    return {
        "one/one.md": {"title": "One"},
        "two/two.md": {},
        "three/three.md": {},
        "four/four.md": {},
        "projects/hello/world.md": {},
    }

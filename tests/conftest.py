import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def album_dir(temp_workspace):
    """Create a music directory carrying both kinds of metadata file."""
    album = temp_workspace / "albums" / "greatest_hits"
    album.mkdir(parents=True)

    (album / "01.flac").write_bytes(b"")
    (album / "02.flac").write_bytes(b"")

    (album / "taggu_self.yml").write_text(
        "title: Greatest Hits\n"
        "artist:\n"
        "  - A\n"
        "  - B\n"
        "year: 1999\n",
        encoding="utf-8",
    )
    (album / "taggu_item.yml").write_text(
        "01.flac:\n"
        "  title: Intro\n"
        "./disc/../02.flac:\n"
        "  title: Outro\n"
        "  featured: null\n",
        encoding="utf-8",
    )

    return album

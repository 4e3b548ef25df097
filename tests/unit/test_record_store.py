from datetime import date
from pathlib import Path

import pytest

from edulinks.core.errors import StoreError
from edulinks.domain.models.record import Record
from edulinks.infrastructure.store.record_store import RecordStore


def _record(title: str) -> Record:
    return Record(
        title=title,
        url="https://example.org",
        description="Example",
        added=date(2024, 3, 1),
        accessed=date(2024, 3, 1),
    )


def test_ensure_layout_reports_creation_once(tmp_path: Path) -> None:
    store = RecordStore(tmp_path / "toml")
    assert store.ensure_layout() is True
    assert store.ensure_layout() is False
    assert (tmp_path / "toml").is_dir()


def test_write_uses_sanitized_title_as_filename(tmp_path: Path) -> None:
    store = RecordStore(tmp_path / "toml")
    path = store.write(_record("Hello, World! (2024)"))
    assert path == tmp_path / "toml" / "hello-world-2024.toml"
    assert store.read(path) == _record("Hello, World! (2024)")


def test_last_write_wins_for_colliding_titles(tmp_path: Path) -> None:
    store = RecordStore(tmp_path)
    first = store.write(_record("Intro to Go"))
    second = store.write(_record("intro_to_go"))
    assert first == second
    assert store.read(second).title == "intro_to_go"
    assert store.list_paths() == [second]


def test_list_paths_is_sorted_and_skips_other_files(tmp_path: Path) -> None:
    store = RecordStore(tmp_path)
    store.write(_record("Zeta"))
    store.write(_record("Alpha"))
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    (tmp_path / ".alpha.toml.tmp").write_text("x", encoding="utf-8")
    (tmp_path / "nested.toml").mkdir()

    assert [p.name for p in store.list_paths()] == ["alpha.toml", "zeta.toml"]
    assert store.identifier_for_path(tmp_path / "alpha.toml") == "alpha"


def test_missing_directory_lists_nothing(tmp_path: Path) -> None:
    assert RecordStore(tmp_path / "absent").list_paths() == []


def test_io_failures_raise_store_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = RecordStore(blocker)

    with pytest.raises(StoreError, match="Unable to create record directory"):
        store.ensure_layout()
    with pytest.raises(StoreError, match="Unable to write record"):
        store.write(_record("Anything"))
    with pytest.raises(StoreError, match="Unable to read record"):
        store.read(tmp_path / "missing.toml")


def test_unencodable_text_raises_store_error_and_leaves_no_temp_file(tmp_path: Path) -> None:
    store = RecordStore(tmp_path)
    record = Record(
        title="Broken Bytes",
        url="https://example.org",
        description="bad \udcff byte",
        added=date(2024, 3, 1),
        accessed=date(2024, 3, 1),
    )

    with pytest.raises(StoreError, match="Unable to write record"):
        store.write(record)

    assert list(tmp_path.iterdir()) == []

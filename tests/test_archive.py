"""Tests for archive naming, file classification and packaging."""

import io
import re
import zipfile
from datetime import datetime, timedelta

import pytest
import pytz

from autovaultbackup.backup.archive import (
    ArchiveEntry,
    build_archive,
    build_backup_filename,
    build_timestamp,
    collect_attachments,
    collect_documents,
    is_attachment,
)
from autovaultbackup.host import LocalVault, VaultFile

from conftest import ATTACHMENTS, DOCUMENTS, FlakyVault


FILENAME_PATTERN = re.compile(r"^MyVault_backup_(\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z)\.zip$")


class TestBackupFilename:
    def test_exact_format(self):
        now = datetime(2024, 5, 1, 10, 20, 30, 123456, tzinfo=pytz.utc)
        assert build_backup_filename("MyVault", now) == "MyVault_backup_2024-05-01T10-20-30-123Z.zip"

    def test_current_time_matches_pattern(self):
        name = build_backup_filename("MyVault")
        match = FILENAME_PATTERN.match(name)
        assert match
        assert ":" not in match.group(1)
        assert "." not in match.group(1)

    def test_naive_datetime_treated_as_utc(self):
        assert build_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03-04-05-000Z"

    def test_converted_to_utc(self):
        shanghai = pytz.timezone("Asia/Shanghai")
        now = shanghai.localize(datetime(2024, 1, 2, 8, 0, 0))
        assert build_timestamp(now) == "2024-01-02T00-00-00-000Z"

    def test_names_sort_in_creation_order(self):
        start = datetime(2024, 12, 31, 23, 59, 59, 999000, tzinfo=pytz.utc)
        names = [build_backup_filename("v", start + timedelta(milliseconds=i * 7)) for i in range(20)]
        assert names == sorted(names)


class TestClassification:
    @pytest.mark.parametrize("path,expected", [
        ("note.md", False),
        ("board.canvas", False),
        ("img/pic.png", True),
        ("paper.PDF", True),
        ("LICENSE", True),
    ])
    def test_is_attachment(self, path, expected):
        assert is_attachment(VaultFile(path)) is expected

    def test_extension(self):
        assert VaultFile("a/b/c.tar.gz").extension == "gz"
        assert VaultFile("Makefile").extension == ""


class TestLocalVault:
    def test_name_defaults_to_directory(self, vault_dir):
        assert LocalVault(vault_dir).get_name() == "MyVault"

    def test_skips_dot_directories(self, vault_dir):
        paths = {f.path for f in LocalVault(vault_dir).get_files()}
        assert ".obsidian/app.json" not in paths
        assert "notes/board.canvas" in paths

    def test_markdown_files(self, vault_dir):
        assert {f.path for f in LocalVault(vault_dir).get_markdown_files()} == DOCUMENTS


class TestCollect:
    def test_documents_read_as_text(self, vault_dir):
        entries = {e.path: e.content for e in collect_documents(LocalVault(vault_dir))}
        assert entries == {"b.md": "b body", "notes/a.md": "# 标题 A"}

    def test_attachments_read_as_binary(self, vault_dir):
        entries, skipped = collect_attachments(LocalVault(vault_dir))
        assert {e.path for e in entries} == ATTACHMENTS
        assert all(isinstance(e.content, bytes) for e in entries)
        assert skipped == []

    def test_failed_attachment_skipped(self, vault_dir):
        entries, skipped = collect_attachments(FlakyVault(vault_dir, failing={"paper.pdf"}))
        assert {e.path for e in entries} == ATTACHMENTS - {"paper.pdf"}
        assert skipped == ["paper.pdf"]


class TestBuildArchive:
    def test_entries_written_with_paths(self):
        data = build_archive([
            ArchiveEntry("notes/a.md", "# 标题"),
            ArchiveEntry("images/pic.png", b"\x00\x01"),
        ])
        with zipfile.ZipFile(io.BytesIO(data)) as zipf:
            assert sorted(zipf.namelist()) == ["images/pic.png", "notes/a.md"]
            assert zipf.read("notes/a.md").decode("utf-8") == "# 标题"
            assert zipf.read("images/pic.png") == b"\x00\x01"

    def test_empty_archive_is_valid(self):
        with zipfile.ZipFile(io.BytesIO(build_archive([]))) as zipf:
            assert zipf.namelist() == []

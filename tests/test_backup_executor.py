"""Tests for the backup pipeline: archive contents, failure handling and notices."""

import os
import time
import zipfile
from datetime import datetime
from pathlib import Path

import pytz

from autovaultbackup.backup import TriggerSource
from autovaultbackup.config import BackupSettings, DEFAULT_BACKUP_DIRNAME
from autovaultbackup.notification import FAILURE_NOTICE, SUCCESS_NOTICE

from conftest import ATTACHMENTS, DOCUMENTS, BrokenDocumentVault, FlakyVault


def archive_names(path):
    with zipfile.ZipFile(path) as zipf:
        return set(zipf.namelist())


class TestCreateBackup:
    def test_documents_and_attachments(self, make_plugin, backup_dir, notifier):
        plugin = make_plugin({"backupDirectory": str(backup_dir)})
        result = plugin._backup_executor.create_backup(plugin.settings)

        assert result.success
        assert result.entry_count == len(DOCUMENTS) + len(ATTACHMENTS)
        assert archive_names(result.path) == DOCUMENTS | ATTACHMENTS
        with zipfile.ZipFile(result.path) as zipf:
            assert zipf.read("notes/a.md").decode("utf-8") == "# 标题 A"
            assert zipf.read("images/pic.png") == b"\x89PNG\r\n\x1a\n"
        assert notifier.messages[-1][1] == SUCCESS_NOTICE.format(filename=result.filename)

    def test_attachments_disabled(self, make_plugin, backup_dir):
        plugin = make_plugin({"backupDirectory": str(backup_dir), "includeAttachments": False})
        result = plugin._backup_executor.create_backup(plugin.settings)

        assert result.success
        assert archive_names(result.path) == DOCUMENTS

    def test_filename_and_location(self, make_plugin, backup_dir):
        plugin = make_plugin({"backupDirectory": str(backup_dir)})
        now = datetime(2024, 5, 1, 10, 20, 30, 123000, tzinfo=pytz.utc)
        result = plugin._backup_executor.create_backup(plugin.settings, now=now)

        assert result.filename == "MyVault_backup_2024-05-01T10-20-30-123Z.zip"
        assert (backup_dir / result.filename).is_file()

    def test_default_directory(self, make_plugin, tmp_path):
        plugin = make_plugin()
        result = plugin._backup_executor.create_backup(plugin.settings)

        expected_dir = tmp_path / "plugin_data" / DEFAULT_BACKUP_DIRNAME
        assert result.success
        assert os.path.dirname(result.path) == str(expected_dir)

    def test_creates_nested_directory(self, make_plugin, tmp_path):
        target = tmp_path / "a" / "b" / "c"
        plugin = make_plugin({"backupDirectory": str(target)})
        assert plugin._backup_executor.create_backup(plugin.settings).success
        assert len(list(target.glob("*.zip"))) == 1

    def test_attachment_failure_does_not_abort(self, make_plugin, vault_dir, backup_dir, notifier):
        plugin = make_plugin({"backupDirectory": str(backup_dir)},
                             vault=FlakyVault(vault_dir, failing={"images/pic.png"}))
        result = plugin._backup_executor.create_backup(plugin.settings)

        assert result.success
        assert result.skipped_attachments == ["images/pic.png"]
        assert archive_names(result.path) == DOCUMENTS | (ATTACHMENTS - {"images/pic.png"})
        assert notifier.messages[-1][1] == SUCCESS_NOTICE.format(filename=result.filename)

    def test_document_failure_aborts_without_writing(self, make_plugin, vault_dir, backup_dir, notifier):
        plugin = make_plugin({"backupDirectory": str(backup_dir)}, vault=BrokenDocumentVault(vault_dir))
        result = plugin._backup_executor.create_backup(plugin.settings)

        assert not result.success
        assert result.filename is None
        assert list(backup_dir.glob("*.zip")) == []
        assert notifier.messages[-1][1] == FAILURE_NOTICE

    def test_directory_error_reports_generic_failure(self, make_plugin, tmp_path, notifier):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        plugin = make_plugin({"backupDirectory": str(blocker / "sub")})
        result = plugin._backup_executor.create_backup(plugin.settings)

        assert not result.success
        assert len(notifier.messages) == 1
        assert notifier.messages[0][1] == FAILURE_NOTICE

    def test_runs_retention_after_write(self, make_plugin, backup_dir):
        backup_dir.mkdir()
        old = time.time() - 3600
        for i in range(3):
            path = backup_dir / f"MyVault_backup_old{i}.zip"
            path.write_bytes(b"PK")
            os.utime(path, (old + i, old + i))

        plugin = make_plugin({"backupDirectory": str(backup_dir), "maxBackups": 2})
        result = plugin._backup_executor.create_backup(plugin.settings)

        names = {p.name for p in backup_dir.glob("*.zip")}
        assert names == {result.filename, "MyVault_backup_old2.zip"}

    def test_settings_passed_explicitly(self, make_plugin, backup_dir, tmp_path):
        plugin = make_plugin({"backupDirectory": str(backup_dir)})
        other = tmp_path / "other"
        result = plugin._backup_executor.create_backup(BackupSettings(backup_directory=str(other)),
                                                       trigger=TriggerSource.ON_CLOSE)

        assert result.trigger is TriggerSource.ON_CLOSE
        assert os.path.dirname(result.path) == str(other)
        assert not backup_dir.exists()

    def test_cleanup_failure_keeps_backup_successful(self, make_plugin, backup_dir, notifier, monkeypatch):
        backup_dir.mkdir()
        old = time.time() - 3600
        for i in range(2):
            path = backup_dir / f"MyVault_backup_old{i}.zip"
            path.write_bytes(b"PK")
            os.utime(path, (old + i, old + i))

        def refuse_unlink(self, *args, **kwargs):
            raise PermissionError(f"cannot delete {self}")

        monkeypatch.setattr(Path, "unlink", refuse_unlink)
        plugin = make_plugin({"backupDirectory": str(backup_dir), "maxBackups": 1})
        result = plugin._backup_executor.create_backup(plugin.settings)

        assert result.success
        assert (backup_dir / result.filename).is_file()
        assert len(list(backup_dir.glob("*.zip"))) == 3
        assert notifier.messages[-1][1] == SUCCESS_NOTICE.format(filename=result.filename)


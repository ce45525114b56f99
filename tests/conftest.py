import threading

import pytest

from autovaultbackup import AutoVaultBackup
from autovaultbackup.host import HostContext, JsonPluginStore, LocalVault, Notifier, VaultFile


DOCUMENTS = {"b.md", "notes/a.md"}
ATTACHMENTS = {"LICENSE", "images/pic.png", "paper.pdf"}


class RecordingNotifier(Notifier):
    def __init__(self):
        self.messages = []

    def notify(self, title, text):
        self.messages.append((title, text))


class FlakyVault(LocalVault):
    """Vault whose binary reads fail for selected paths."""

    def __init__(self, root, failing=()):
        super().__init__(root)
        self.failing = set(failing)

    def read_binary(self, file: VaultFile) -> bytes:
        if file.path in self.failing:
            raise OSError(f"cannot read {file.path}")
        return super().read_binary(file)


class BrokenDocumentVault(LocalVault):
    def read(self, file: VaultFile) -> str:
        raise OSError("disk error")


@pytest.fixture
def vault_dir(tmp_path):
    root = tmp_path / "MyVault"
    (root / "notes").mkdir(parents=True)
    (root / "images").mkdir()
    (root / ".obsidian").mkdir()
    (root / "b.md").write_text("b body", encoding="utf-8")
    (root / "notes" / "a.md").write_text("# 标题 A", encoding="utf-8")
    (root / "notes" / "board.canvas").write_text("{}", encoding="utf-8")
    (root / "images" / "pic.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "paper.pdf").write_bytes(b"%PDF-1.4")
    (root / "LICENSE").write_bytes(b"MIT")
    (root / ".obsidian" / "app.json").write_text("{}", encoding="utf-8")
    return root


@pytest.fixture
def backup_dir(tmp_path):
    return tmp_path / "backups"


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def store(tmp_path):
    return JsonPluginStore(tmp_path / "plugin" / "data.json")


@pytest.fixture
def make_plugin(tmp_path, vault_dir, notifier, store):
    plugins = []

    def _make(config=None, vault=None):
        context = HostContext(
            vault=vault or LocalVault(vault_dir),
            store=store,
            notifier=notifier,
            data_path=tmp_path / "plugin_data",
        )
        plugin = AutoVaultBackup(context)
        plugin.init_plugin(config)
        plugins.append(plugin)
        return plugin

    yield _make
    for plugin in plugins:
        plugin.stop_service()


class SlowVault(LocalVault):
    """Vault whose first document read blocks until `release` is set."""

    def __init__(self, root):
        super().__init__(root)
        self.entered = threading.Event()
        self.release = threading.Event()

    def read(self, file: VaultFile) -> str:
        if not self.entered.is_set():
            self.entered.set()
            self.release.wait(timeout=10)
        return super().read(file)

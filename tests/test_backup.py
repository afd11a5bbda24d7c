from datetime import datetime

from config_store.backup import BackupManager


def test_backup_path_uses_second_resolution(tmp_path):
    manager = BackupManager(tmp_path / "app.yml")
    dest = manager.backup_path(datetime(2024, 1, 2, 3, 4, 5, 999999))
    assert dest == tmp_path / "app.yml.backup_20240102_030405"


def test_backup_copies_bytes(tmp_path, clock):
    source = tmp_path / "app.yml"
    source.write_bytes(b"a: 1\nb: [x, y]\n")
    dest = BackupManager(source, clock=clock).backup()
    assert dest.name == "app.yml.backup_20241231_093000"
    assert dest.read_bytes() == source.read_bytes()


def test_same_second_backup_overwrites_previous(tmp_path, clock):
    source = tmp_path / "app.yml"
    manager = BackupManager(source, clock=clock)
    source.write_text("first: 1\n")
    manager.backup()
    source.write_text("second: 2\n")
    manager.backup()
    backups = manager.list_backups()
    assert len(backups) == 1
    assert backups[0].read_text() == "second: 2\n"


def test_list_backups_sorted_oldest_first(tmp_path, clock):
    source = tmp_path / "app.yml"
    source.write_text("a: 1\n")
    manager = BackupManager(source, clock=clock)
    first = manager.backup()
    clock.advance(61)
    second = manager.backup()
    (tmp_path / "other.yml.backup_20200101_000000").write_text("")
    assert manager.list_backups() == [first, second]


def test_list_backups_without_directory(tmp_path):
    manager = BackupManager(tmp_path / "missing" / "app.yml")
    assert manager.list_backups() == []

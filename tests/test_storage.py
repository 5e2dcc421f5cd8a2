import pytest

from sdfileserver.storage import MountError, Storage


def test_mount_and_unmount(tmp_path):
    storage = Storage(tmp_path)
    assert storage.is_mounted() is False
    storage.mount()
    assert storage.is_mounted() is True
    storage.unmount()
    assert storage.is_mounted() is False


def test_mount_missing_directory(tmp_path):
    storage = Storage(tmp_path / "missing")
    with pytest.raises(MountError):
        storage.mount()
    assert storage.is_mounted() is False


def test_mount_on_a_file(tmp_path):
    target = tmp_path / "plain"
    target.write_bytes(b"x")
    with pytest.raises(MountError):
        Storage(target).mount()


def test_double_mount_and_unmount(tmp_path):
    storage = Storage(tmp_path)
    storage.mount()
    with pytest.raises(MountError):
        storage.mount()
    storage.unmount()
    with pytest.raises(MountError):
        storage.unmount()


def test_path_for(tmp_path):
    storage = Storage(tmp_path)
    storage.mount()
    assert storage.path_for("DATA.TXT") == tmp_path / "DATA.TXT"


def test_path_for_requires_mount(tmp_path):
    with pytest.raises(MountError):
        Storage(tmp_path).path_for("DATA.TXT")


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "..\\x", "a\0b"])
def test_path_for_rejects_bad_names(tmp_path, name):
    storage = Storage(tmp_path)
    storage.mount()
    with pytest.raises(ValueError):
        storage.path_for(name)


def test_context_manager(tmp_path):
    with Storage(tmp_path) as storage:
        assert storage.is_mounted() is True
    assert storage.is_mounted() is False


def test_context_manager_unmounts_on_error(tmp_path):
    storage = Storage(tmp_path)
    with pytest.raises(RuntimeError):
        with storage:
            raise RuntimeError("boom")
    assert storage.is_mounted() is False
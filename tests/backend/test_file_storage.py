import pytest

from roster_lib.storage.file_backend import FileStorageBackend


def test_save_load_delete_and_list_keys(tmp_path):
    b = FileStorageBackend(data_dir=tmp_path / "data_test")
    ns = "unittest"
    key = "item1"
    value = b"payload"

    b.save(ns, key, value)
    assert b.exists(ns, key) is True
    keys = list(b.list_keys(ns))
    assert key in keys
    loaded = b.load(ns, key)
    assert loaded == value
    b.delete(ns, key)
    assert b.exists(ns, key) is False


def test_text_values_are_stored_as_utf8(tmp_path):
    b = FileStorageBackend(data_dir=tmp_path)
    b.configure(suffix="yml")
    b.save("config", "server_config", "server_name: Đà Nẵng\n")
    assert (tmp_path / "config" / "server_config.yml").exists()
    assert b.load("config", "server_config").decode("utf-8") == "server_name: Đà Nẵng\n"


def test_missing_keys_raise_keyerror(tmp_path):
    b = FileStorageBackend(data_dir=tmp_path)
    with pytest.raises(KeyError):
        b.load("ns", "missing")
    with pytest.raises(KeyError):
        b.delete("ns", "missing")


def test_list_keys_ignores_other_suffixes(tmp_path):
    b = FileStorageBackend(data_dir=tmp_path, suffix=".yaml")
    b.save("people", "1", b"a")
    (tmp_path / "people" / "notes.txt").write_text("x")
    assert list(b.list_keys("people")) == ["1"]

import pytest


def test_get_set_overwrite(storage):
    assert storage.get_item("flashcardState") is None
    storage.set_item("flashcardState", '{"currentIndex": 1}')
    assert storage.get_item("flashcardState") == '{"currentIndex": 1}'

    storage.set_item("flashcardState", '{"currentIndex": 4}')
    assert storage.get_item("flashcardState") == '{"currentIndex": 4}'
    assert not list(storage.base_path.glob("*.tmp"))


def test_clear_all(storage):
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    storage.clear_all()
    assert storage.get_item("a") is None
    assert storage.base_path.exists()


@pytest.mark.parametrize("key", ["", "../escape", "a/b", "with space"])
def test_rejects_unsafe_keys(storage, key):
    with pytest.raises(ValueError):
        storage.set_item(key, "x")

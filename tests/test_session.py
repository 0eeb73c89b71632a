from nextgen.session import SessionStore


def test_save_load_clear(tmp_path, student):
    store = SessionStore(tmp_path / "sub" / "user.json")
    assert store.load() is None

    store.save(student)
    assert store.load() == student

    store.clear()
    assert store.load() is None
    store.clear()


def test_save_replaces_previous_profile(tmp_path, student):
    store = SessionStore(tmp_path / "user.json")
    store.save(student)
    other = type(student)(user_id="STU-2", first_name="Ben", skills="Go")
    store.save(other)
    assert store.load() == other


def test_corrupt_session_loads_as_none(tmp_path):
    path = tmp_path / "user.json"
    path.write_text("{not json", encoding="utf-8")
    assert SessionStore(path).load() is None
    path.write_text("[1, 2]", encoding="utf-8")
    assert SessionStore(path).load() is None

from nextgen import config


def test_defaults_without_settings_file(tmp_path, monkeypatch):
    for key in ("NGM_STUDENT_API_URL", "NGM_JOBS_PATH", "NGM_USE_MOCK_JOBS", "NGM_SESSION_PATH"):
        monkeypatch.delenv(key, raising=False)
    settings = config.load_settings(tmp_path / "missing.yaml")
    assert settings["student_api_url"] == ""
    assert settings["use_mock_jobs"] is False
    assert settings["top_n"] == 3
    assert settings["jobs_path"] == config.PROJECT_ROOT / "excel" / "synthetic_jobs.xlsx"


def test_file_values_and_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "student_api_url: https://file.example/exec\n"
        "jobs_path: /srv/jobs.xlsx\n"
        "top_n: 5\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("NGM_STUDENT_API_URL", "https://env.example/exec")
    monkeypatch.setenv("NGM_USE_MOCK_JOBS", "yes")
    monkeypatch.delenv("NGM_JOBS_PATH", raising=False)

    settings = config.load_settings(path)

    assert settings["student_api_url"] == "https://env.example/exec"
    assert str(settings["jobs_path"]) == "/srv/jobs.xlsx"
    assert settings["use_mock_jobs"] is True
    assert settings["top_n"] == 5


def test_bad_top_n_falls_back(tmp_path, monkeypatch):
    monkeypatch.delenv("NGM_USE_MOCK_JOBS", raising=False)
    path = tmp_path / "settings.yaml"
    path.write_text("top_n: many\n", encoding="utf-8")
    assert config.load_settings(path)["top_n"] == 3


def test_session_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("NGM_SESSION_PATH", str(tmp_path / "user.json"))
    settings = config.load_settings(tmp_path / "missing.yaml")
    assert settings["session_path"] == tmp_path / "user.json"

import yaml

import config
from config import (
    ClientConfig,
    load_client_config,
    persist_view_state,
    save_client_config,
    set_credentials,
    set_current_project,
    set_display_preference,
)


def _use_tmp_config(monkeypatch, tmp_path):
    path = tmp_path / "barnacle" / "client.yml"
    monkeypatch.setenv("BARNACLE_CONFIG", str(path))
    for name in config.TOKEN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return path


def test_missing_or_broken_file_yields_defaults(monkeypatch, tmp_path):
    path = _use_tmp_config(monkeypatch, tmp_path)
    assert load_client_config() == ClientConfig()
    path.parent.mkdir(parents=True)
    path.write_text("key: [unclosed", encoding="utf-8")
    assert load_client_config() == ClientConfig()
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_client_config() == ClientConfig()


def test_roundtrip_and_coercion(monkeypatch, tmp_path):
    path = _use_tmp_config(monkeypatch, tmp_path)
    save_client_config(ClientConfig(gist_id="abc", token="t", current_project="work", show_today=True))
    loaded = load_client_config()
    assert loaded.gist_id == "abc"
    assert loaded.current_project == "work"
    assert loaded.show_today is True
    path.write_text("show_finished: 'off'\nauto_save: no\nsave_workers: 4\n", encoding="utf-8")
    loaded = load_client_config()
    assert loaded.show_finished is False
    assert loaded.auto_save is False
    assert not hasattr(loaded, "save_workers")


def test_helpers_merge_into_existing_file(monkeypatch, tmp_path):
    path = _use_tmp_config(monkeypatch, tmp_path)
    set_credentials("tok", "gid")
    set_current_project("home")
    set_display_preference("show_finished", False)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data == {"token": "tok", "gist_id": "gid", "current_project": "home", "show_finished": False}
    set_current_project(None)
    assert "current_project" not in yaml.safe_load(path.read_text(encoding="utf-8"))


def test_persist_view_state_writes_only_view_keys(tmp_path):
    path = tmp_path / "client.yml"
    persist_view_state(ClientConfig(token="secret", current_project="p", show_today=True), path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data == {"current_project": "p", "show_finished": True, "show_today": True}


def test_token_falls_back_to_environment(monkeypatch, tmp_path):
    _use_tmp_config(monkeypatch, tmp_path)
    cfg = ClientConfig(gist_id="g")
    assert cfg.store_kind() == "local"
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    assert cfg.resolved_token() == "env-token"
    assert cfg.store_kind() == "gist"
    monkeypatch.setenv("BARNACLE_GITHUB_TOKEN", "own-token")
    assert cfg.resolved_token() == "own-token"
    assert ClientConfig(gist_id="g", store="local").store_kind() == "local"

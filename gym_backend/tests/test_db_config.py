import os

from gym_backend import db


def test_config_yaml_parsed_once_until_it_changes(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("db_acquire_timeout: 12\nadmin_token: abc\n", encoding="utf-8")
    monkeypatch.setenv("GYM_CONFIG_PATH", str(cfg))
    monkeypatch.setattr(db, "_config_cache", {})

    calls = []
    real_parse = db._parse_config

    def counting_parse(path):
        calls.append(path)
        return real_parse(path)

    monkeypatch.setattr(db, "_parse_config", counting_parse)

    for _ in range(3):
        with db.get_conn() as conn:
            conn.execute("SELECT 1")
    assert db.get_setting("admin_token") == "abc"
    assert len(calls) == 1

    cfg.write_text("db_acquire_timeout: 12\nadmin_token: xyz\n", encoding="utf-8")
    st = os.stat(cfg)
    os.utime(cfg, ns=(st.st_atime_ns, st.st_mtime_ns + 1_000_000_000))
    assert db.get_setting("admin_token") == "xyz"
    assert len(calls) == 2


def test_env_wins_over_config(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("admin_token: from-file\n", encoding="utf-8")
    monkeypatch.setenv("GYM_CONFIG_PATH", str(cfg))
    assert db.get_setting("admin_token") == "from-file"
    monkeypatch.setenv("GYM_ADMIN_TOKEN", "from-env")
    assert db.get_setting("admin_token") == "from-env"
    assert db.get_setting("missing_key", "dflt") == "dflt"

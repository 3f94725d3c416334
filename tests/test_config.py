import json

from passmeter.config import DEFAULTS, config_path, load_config, save_config

def test_defaults_when_missing(isolated_config):
    assert config_path() == str(isolated_config)
    assert load_config() == DEFAULTS

def test_save_and_merge():
    save_config({"example_password": "tiny cat on a big ladder"})
    cfg = load_config()
    assert cfg["example_password"] == "tiny cat on a big ladder"
    assert cfg["mask_input"] is True

def test_malformed_file_falls_back(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS

def test_non_object_falls_back(isolated_config):
    isolated_config.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.write_text(json.dumps(["a", "b"]), encoding="utf-8")
    assert load_config() == DEFAULTS

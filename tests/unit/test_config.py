import json

import pytest

from modelgen.codegen.core.config import (
    EXAMPLE_CONFIG,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def test_target_defaults():
    dart = load_config("dart")
    assert dart.indent_size == 2
    assert dart.custom["null_safety"] is True
    assert dart.models_dir == "lib/models"

    rust = load_config("rust-dao")
    assert rust.custom["connection_type"] == "PgConnection"
    assert rust.custom["model_derives"] == ["Queryable", "Serialize"]


def test_defaults_are_not_shared_between_calls():
    first = load_config("rust")
    first.custom["model_derives"].append("Debug")

    assert load_config("rust").custom["model_derives"] == ["Queryable", "Serialize"]


def test_overrides_merge_custom_keys():
    config = load_config("rust", {"custom": {"connection_type": "MysqlConnection"}})

    assert config.custom["connection_type"] == "MysqlConnection"
    assert config.custom["model_derives"] == ["Queryable", "Serialize"]


def test_unknown_keys_land_in_custom():
    config = load_config("dart", {"null_safety": False, "add_comments": False})

    assert config.custom["null_safety"] is False
    assert config.add_comments is False


def test_config_file_then_overrides(tmp_path):
    config_file = tmp_path / "modelgen.json"
    config_file.write_text(json.dumps(EXAMPLE_CONFIG), encoding="utf-8")

    config = load_config("rust", {"connection_type": "PgConnection"}, config_file)

    assert config.custom["connection_type"] == "PgConnection"
    assert config.custom["null_safety"] is False
    assert config.models_dir == "lib/models"


@pytest.mark.parametrize(
    "file_name, contents",
    [
        ("config.yaml", "{}"),
        ("config.json", "{not json"),
        ("config.json", "[1, 2]"),
    ],
)
def test_invalid_config_files(tmp_path, file_name, contents):
    path = tmp_path / file_name
    path.write_text(contents, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config("dart", config_file=path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config("dart", config_file=tmp_path / "missing.json")


def test_save_config_round_trip(tmp_path):
    manager = ConfigManager()
    path = tmp_path / "saved.json"
    manager.save_config(manager.get_config("dart"), path)

    assert manager.get_config(config_file=path) == manager.get_config("dart")


def test_validate_config():
    manager = ConfigManager()

    assert manager.validate_config(manager.get_config("rust"), "rust") == []

    bad = GeneratorConfig(indent_size=0, models_dir="/abs", custom={"connection_type": "Pg Conn"})
    warnings = manager.validate_config(bad, "rust")
    assert len(warnings) == 3


def test_validate_config_rejects_non_integer_indent():
    warnings = ConfigManager().validate_config(GeneratorConfig(indent_size="4"), "dart")
    assert warnings == ["Invalid indent_size: 4"]

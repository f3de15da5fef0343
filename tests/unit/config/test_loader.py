from __future__ import annotations

import json
from pathlib import Path

import pytest

from cartographer.config import (
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    load_config,
    resolve_config_path,
)
from cartographer.storage import LocalJsonStorageConfig, MemoryStorageConfig, S3JsonStorageConfig
from cartographer.utils.functools.models import is_err, is_ok


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_json_config_with_local_storage(tmp_path: Path) -> None:
    config_path = tmp_path / "local.cartographer.json"
    _write_json(config_path, {"storage": {"type": "local-json", "dir": str(tmp_path / "data")}})

    result = load_config(config_path)

    assert is_ok(result)
    storage = result.unwrap().storage
    assert isinstance(storage, LocalJsonStorageConfig)
    assert storage.dir == tmp_path / "data"


def test_load_yaml_config_with_s3_storage(tmp_path: Path) -> None:
    config_path = tmp_path / "cartographer.yaml"
    config_path.write_text(
        """
storage:
  type: s3-json
  bucket_name: atlas
  creds:
    access_key_id: AKIA
    secret_access_key: secret
logging:
  log_level: DEBUG
""",
        encoding="utf-8",
    )

    config = load_config(config_path).unwrap()

    assert isinstance(config.storage, S3JsonStorageConfig)
    assert config.storage.bucket_name == "atlas"
    assert config.storage.creds.secret_access_key.get_secret_value() == "secret"
    assert config.logging.log_level == "DEBUG"


def test_empty_config_defaults_to_memory(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.json"
    config_path.write_text("", encoding="utf-8")

    config = load_config(config_path).unwrap()

    assert isinstance(config.storage, MemoryStorageConfig)


def test_load_missing_file_returns_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"

    result = load_config(missing)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ConfigNotFoundError)
    assert error.expected_path == missing


def test_load_invalid_syntax_returns_parse_error(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.json"
    config_path.write_text('{"storage": [', encoding="utf-8")

    error = load_config(config_path).unwrap_err()

    assert isinstance(error, ConfigYamlError)
    assert error.path == config_path


def test_load_non_mapping_returns_validation_error(tmp_path: Path) -> None:
    config_path = tmp_path / "list.json"
    _write_json(config_path, ["storage"])

    error = load_config(config_path).unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert error.field is None


def test_load_unknown_storage_type_returns_validation_error(tmp_path: Path) -> None:
    config_path = tmp_path / "xml.json"
    _write_json(config_path, {"storage": {"type": "xml-files"}})

    error = load_config(config_path).unwrap_err()

    assert isinstance(error, ConfigValidationError)
    assert error.field is not None
    assert error.field.startswith("storage")


def test_resolve_config_path_prefers_explicit_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARTOGRAPHER_CONFIG_PATH", str(tmp_path / "env.json"))

    assert resolve_config_path(tmp_path / "explicit.json") == tmp_path / "explicit.json"
    assert resolve_config_path() == tmp_path / "env.json"


def test_resolve_config_path_defaults_to_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CARTOGRAPHER_CONFIG_PATH", raising=False)
    monkeypatch.chdir(tmp_path)

    assert resolve_config_path() == tmp_path / "local.cartographer.json"

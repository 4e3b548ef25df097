from pathlib import Path

import pytest

from edulinks.core.config import load_config, with_overrides
from edulinks.core.errors import ConfigurationError

ENV_VARS = (
    "EDULINKS_HOME",
    "EDULINKS_STRICT_DESCRIPTION",
    "EDULINKS_FETCH_DESCRIPTIONS",
    "EDULINKS_FETCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_place_records_under_project_root(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config.project_root == tmp_path.resolve()
    assert config.records_dir == tmp_path.resolve() / "toml"
    assert config.strict_description is False
    assert config.fetch_descriptions is True
    assert config.fetch_timeout == 10.0


def test_environment_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EDULINKS_HOME", str(tmp_path / "links"))
    monkeypatch.setenv("EDULINKS_STRICT_DESCRIPTION", "Yes")
    monkeypatch.setenv("EDULINKS_FETCH_DESCRIPTIONS", "off")
    monkeypatch.setenv("EDULINKS_FETCH_TIMEOUT", "2.5")

    config = load_config(tmp_path)

    assert config.records_dir == (tmp_path / "links").resolve()
    assert config.strict_description is True
    assert config.fetch_descriptions is False
    assert config.fetch_timeout == 2.5


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("EDULINKS_STRICT_DESCRIPTION", "maybe"),
        ("EDULINKS_FETCH_TIMEOUT", "soon"),
        ("EDULINKS_FETCH_TIMEOUT", "-1"),
    ],
)
def test_invalid_environment_values_raise(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError, match=name):
        load_config(tmp_path)


def test_with_overrides_only_changes_given_values(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    changed = with_overrides(config, strict_description=True, fetch_descriptions=None)
    assert changed.strict_description is True
    assert changed.fetch_descriptions is True
    assert changed.records_dir == config.records_dir
    assert with_overrides(config, records_dir=tmp_path / "elsewhere").records_dir == (tmp_path / "elsewhere").resolve()

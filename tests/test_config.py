"""Tests for wuw.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from wuw.config import ConfigError, WuwConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, WuwConfig)
    assert config.root == tmp_path.resolve()
    assert config.no_std is False
    assert config.source_suffix == ".go"
    assert config.stop_after == 5
    assert config.std_prefixes == ["golang.org/x/"]
    assert config.std_lookup == "toolchain"
    assert config.go_binary == "go"


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".wuw.yml"
    config_file.write_text(
        """
no_std: true
source_suffix: "go"
stop_after: 8
std_prefixes:
  - "golang.org/x/"
  - "internal.example.com/"
std_lookup: heuristic
go_binary: "/usr/local/go/bin/go"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.no_std is True
    assert config.source_suffix == ".go"
    assert config.stop_after == 8
    assert config.std_prefixes == ["golang.org/x/", "internal.example.com/"]
    assert config.std_lookup == "heuristic"
    assert config.go_binary == "/usr/local/go/bin/go"


def test_load_config_accepts_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".wuw.yml").write_text("\n", encoding="utf-8")
    assert load_config(tmp_path).stop_after == 5


def test_load_config_ignores_wrongly_typed_values(tmp_path: Path) -> None:
    (tmp_path / ".wuw.yml").write_text("no_std: [1, 2]\ngo_binary: {}\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.no_std is False
    assert config.go_binary == "go"


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "std_lookup: magic\n",
        "stop_after: 0\n",
        "stop_after: many\n",
        "no_std: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_content(tmp_path: Path, content: str) -> None:
    (tmp_path / ".wuw.yml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_unreadable_file(tmp_path: Path) -> None:
    (tmp_path / ".wuw.yml").mkdir()
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert ".wuw.yml" in str(excinfo.value)

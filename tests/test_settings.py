"""Tests BlockSettings — défauts, variables d'environnement."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from theme_blocks import BlockSettings, Theme, ThemeBlock
from theme_blocks.settings import DEFAULT_CONTROLLER_FILE, DEFAULT_MODEL_FILE

ENV_VARS = [
    "THEME_BLOCKS_CODE_EXT",
    "THEME_BLOCKS_DEFAULT_CONTROLLER",
    "THEME_BLOCKS_DEFAULT_MODEL",
    "THEME_ASSETS_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    s = BlockSettings.from_env()
    assert s.code_extension == "py"
    assert s.default_controller_file == DEFAULT_CONTROLLER_FILE
    assert s.default_model_file == DEFAULT_MODEL_FILE
    assert s.assets_base_url == "/themes"
    assert s.config_filenames == ["config.json", "config.yaml", "config.yml"]


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("THEME_BLOCKS_CODE_EXT", ".php")
    monkeypatch.setenv("THEME_BLOCKS_DEFAULT_CONTROLLER", str(tmp_path / "BaseController.php"))
    monkeypatch.setenv("THEME_BLOCKS_DEFAULT_MODEL", str(tmp_path / "BaseModel.php"))
    monkeypatch.setenv("THEME_ASSETS_URL", "https://cdn.test/themes")
    s = BlockSettings.from_env()
    assert s.code_extension == "php"
    assert s.default_controller_file == tmp_path / "BaseController.php"
    assert s.default_model_file == tmp_path / "BaseModel.php"
    assert s.assets_base_url == "https://cdn.test/themes"


def test_empty_extension_rejected():
    with pytest.raises(ValidationError):
        BlockSettings(code_extension=" . ")


def test_block_reads_env_when_no_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("THEME_BLOCKS_CODE_EXT", "php")
    folder = tmp_path / "blocks" / "hero"
    folder.mkdir(parents=True)
    (folder / "view.php").write_text("<?php ?>")
    block = ThemeBlock(Theme(slug="demo", folder=tmp_path), "hero")
    assert block.is_php_block()
    assert block.get_view_file() == Path(folder / "view.php")

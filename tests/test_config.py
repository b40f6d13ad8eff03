from pathlib import Path

import pytest

from mclang_readability.config import (
    ReadabilityConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    cfg = load_config(None)
    assert cfg == ReadabilityConfig()
    assert cfg.language_suffixes == [".lang"]
    assert cfg.preview_chars == 1000


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict({"preview_chars": 200, "window_size": 5})
    assert cfg.preview_chars == 200


def test_config_from_dict_accepts_single_suffix():
    cfg = config_from_dict({"language_suffixes": ".LANG"})
    assert cfg.language_suffixes == [".LANG"]


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "report_filename: report.txt\nlog_level: debug\n", encoding="utf-8"
    )
    cfg = config_from_yaml(path)
    assert cfg.report_filename == "report.txt"
    assert cfg.log_level == "debug"


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)


def test_config_rejects_unknown_log_level():
    with pytest.raises(ValueError, match="log_level"):
        ReadabilityConfig(log_level="loud")


def test_config_rejects_unknown_encoding():
    with pytest.raises(ValueError, match="encoding"):
        config_from_dict({"encoding": "no-such-codec"})

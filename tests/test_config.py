import json
import logging

import pytest

from guitar_tools.core.config import ConfigManager, TunerConfig
from guitar_tools.logging_config import setup_logging


def test_defaults_are_written(tmp_path):
    manager = ConfigManager(str(tmp_path))
    assert (tmp_path / "tuner.json").exists()
    assert (tmp_path / "reference_tone.json").exists()
    assert manager.to_tuner_config() == TunerConfig()


def test_updates_survive_reload(tmp_path):
    ConfigManager(str(tmp_path)).update_config("tuner", {"harmonic_guard": 30})
    config = ConfigManager(str(tmp_path)).to_tuner_config()
    assert config.harmonic_guard == 30
    assert config.capture_duration == 1.0


def test_partial_file_is_completed(tmp_path):
    (tmp_path / "reference_tone.json").write_text(json.dumps({"volume": 40}))
    manager = ConfigManager(str(tmp_path))
    assert manager.get_config("reference_tone") == {"sample_rate": 48000, "volume": 40}


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "tuner.json").write_text("{not json")
    manager = ConfigManager(str(tmp_path))
    assert manager.get_config("tuner")["harmonic_guard"] == 20


def test_reset_and_unknown_sections(tmp_path):
    manager = ConfigManager(str(tmp_path))
    manager.update_config("tuner", {"capture_duration": 2.0})
    assert manager.reset_config("tuner")
    assert manager.get_config("tuner")["capture_duration"] == 1.0
    assert not manager.update_config("mixer", {})
    assert not manager.reset_config("mixer")


def test_out_of_range_values_are_rejected(tmp_path):
    ConfigManager(str(tmp_path)).update_config("tuner", {"capture_duration": 0})
    with pytest.raises(ValueError):
        ConfigManager(str(tmp_path)).to_tuner_config()


def test_setup_logging_levels():
    setup_logging("debug")
    assert logging.getLogger("guitar_tools.analysis").level == logging.DEBUG
    setup_logging()
    assert logging.getLogger("guitar_tools.analysis").level == logging.INFO
    with pytest.raises(ValueError):
        setup_logging("loud")


@pytest.mark.parametrize("bad_value", [None, [1, 2], {"hz": 20}, "loud"])
def test_wrongly_typed_values_are_rejected(tmp_path, bad_value):
    (tmp_path / "tuner.json").write_text(json.dumps({"harmonic_guard": bad_value}))
    with pytest.raises(ValueError, match="harmonic_guard"):
        ConfigManager(str(tmp_path)).to_tuner_config()

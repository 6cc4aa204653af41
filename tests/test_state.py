import pytest

from solar_system.state import SimulationSettings


def test_defaults():
    settings = SimulationSettings()
    assert settings.global_speed == 1.0
    assert settings.paused is False
    assert settings.night_mode is True


def test_subscribers_only_hear_their_field():
    settings = SimulationSettings()
    heard = []
    settings.subscribe("night_mode", heard.append)
    settings.global_speed = 3
    settings.paused = True
    settings.night_mode = False
    assert heard == [False]


def test_unchanged_value_does_not_publish():
    settings = SimulationSettings(night_mode=False)
    heard = []
    settings.subscribe("night_mode", heard.append)
    settings.night_mode = False
    assert heard == []


def test_unknown_field_raises():
    with pytest.raises(KeyError):
        SimulationSettings().subscribe("volume", print)

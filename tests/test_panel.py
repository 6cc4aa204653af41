import pytest

from solar_system.lighting import DAY, LightingModeSwitch
from solar_system.panel import SLIDER, TOGGLE, ControlPanel, build_controls


def test_controls_cover_every_setting(state):
    controls = build_controls(state)
    top = [(c.label, c.kind, c.minimum, c.maximum) for c in controls if c.folder is None]
    assert top == [
        ("Global Speed", SLIDER, 0.0, 5.0),
        ("Pause / Resume", TOGGLE, None, None),
        ("Toggle Dark Mode", TOGGLE, None, None),
    ]
    assert len([c for c in controls if c.folder is not None]) == 16


def test_one_folder_per_planet(state):
    folders = ControlPanel(state).folders
    assert list(folders) == [planet.name for planet in state.planets]
    orbit, spin = folders["Jupiter"]
    assert (orbit.label, orbit.minimum, orbit.maximum) == ("Orbit", 0.0, 2.0)
    assert (spin.label, spin.minimum, spin.maximum) == ("Spin", 0.0, 1.0)


def test_sliders_clamp_to_their_range(state):
    panel = ControlPanel(state)
    assert panel.find("global_speed").set(9) == 5.0
    assert state.settings.global_speed == 5.0
    assert panel.find("orbit_rate", "Earth").set(-1) == 0.0
    assert state.scene.planet("Earth").body.orbit_rate == 0.0
    panel.find("spin_rate", "Earth").set(0.5)
    assert state.scene.planet("Earth").body.spin_rate == 0.5
    assert state.scene.planet("Mars").body.spin_rate == pytest.approx(0.18)


def test_dark_mode_toggle_reaches_lighting(state):
    LightingModeSwitch(state.scene.lighting).bind(state.settings)
    panel = ControlPanel(state)
    panel.find("night_mode").set(False)
    assert state.scene.lighting.background == DAY
    assert state.scene.lighting.ambient_intensity == 0.5


def test_keyboard_accelerators(state):
    panel = ControlPanel(state)
    assert panel.handle_key("space")
    assert state.settings.paused is True
    assert panel.handle_key("n")
    assert state.settings.night_mode is False
    assert not panel.handle_key("x")


def test_find_unknown_control_raises(state):
    with pytest.raises(KeyError):
        ControlPanel(state).find("orbit_rate", "Pluto")

from solar_system.config import ORBIT_RANGE, SPEED_RANGE, SPIN_RANGE

SLIDER = "slider"
TOGGLE = "toggle"

# keyboard shortcuts for the toggles
ACCELERATORS = {
    "space": "paused",
    "n": "night_mode",
}


class Control:
    def __init__(self, label, target, field, kind=SLIDER, minimum=None, maximum=None, folder=None):
        self.label = label
        self.target = target
        self.field = field
        self.kind = kind
        self.minimum = minimum
        self.maximum = maximum
        self.folder = folder

    @property
    def value(self):
        return getattr(self.target, self.field)

    def set(self, value):
        if self.kind == SLIDER:
            value = max(self.minimum, min(self.maximum, float(value)))
        else:
            value = bool(value)
        setattr(self.target, self.field, value)
        return value

    def __repr__(self):
        return f"Control({self.label!r}, field={self.field!r}, folder={self.folder!r})"


def build_controls(state):
    settings = state.settings
    controls = [Control("Global Speed", settings, "global_speed", SLIDER, *SPEED_RANGE)]
    for planet in state.planets:
        speed = planet.body.speed
        folder = planet.body.name
        controls.append(Control("Orbit", speed, "orbit_rate", SLIDER, *ORBIT_RANGE, folder=folder))
        controls.append(Control("Spin", speed, "spin_rate", SLIDER, *SPIN_RANGE, folder=folder))
    controls.append(Control("Pause / Resume", settings, "paused", TOGGLE))
    controls.append(Control("Toggle Dark Mode", settings, "night_mode", TOGGLE))
    return controls


class ControlPanel:
    """Widget-independent view of the settings panel.

    Widgets write through ``Control.set``; nothing here knows how they are drawn.
    """

    def __init__(self, state):
        self.state = state
        self.controls = build_controls(state)

    @property
    def folders(self):
        grouped = {}
        for control in self.controls:
            if control.folder is not None:
                grouped.setdefault(control.folder, []).append(control)
        return grouped

    @property
    def top_level(self):
        return [control for control in self.controls if control.folder is None]

    def find(self, field, folder=None):
        for control in self.controls:
            if control.field == field and control.folder == folder:
                return control
        raise KeyError(field if folder is None else f"{folder}/{field}")

    def toggle(self, field):
        control = self.find(field)
        return control.set(not control.value)

    def handle_key(self, key):
        field = ACCELERATORS.get(key)
        if field is None:
            return False
        self.toggle(field)
        return True

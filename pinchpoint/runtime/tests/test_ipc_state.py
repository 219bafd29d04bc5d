from pinchpoint.core import ipc_state
from pinchpoint.core.control import ControlState


def test_missing_file_reads_defaults(tmp_path):
    path = tmp_path / "state.json"
    assert ipc_state.read_state(path) == {"enabled": True, "slides": False}


def test_flags_round_trip_independently(tmp_path):
    path = tmp_path / "state.json"
    ipc_state.init_state(path=path)
    ipc_state.set_enabled(False, path=path)
    ipc_state.set_slides(True, path=path)
    assert ipc_state.read_state(path) == {"enabled": False, "slides": True}


def test_init_does_not_clobber_existing_state(tmp_path):
    path = tmp_path / "state.json"
    ipc_state.set_enabled(False, path=path)
    ipc_state.init_state(enabled=True, path=path)
    assert ipc_state.read_state(path)["enabled"] is False


def test_garbage_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json")
    assert ipc_state.read_state(path)["enabled"] is True


def test_sync_into_control_state(tmp_path):
    path = tmp_path / "state.json"
    ipc_state.write_state(path, enabled=False, slides=True)
    state = ControlState()
    ipc_state.sync_into(state, path=path)
    assert not state.is_enabled()
    assert state.slides_enabled()


def test_control_state_toggles():
    state = ControlState()
    assert state.toggle() is False
    assert state.toggle_slides() is True
    # each instance owns its lock
    assert ControlState()._lock is not state._lock


def test_slides_preset_beats_stale_state_file(tmp_path):
    from argparse import Namespace

    from pinchpoint.injector.device import LogPointer
    from pinchpoint.interpreter.pipeline import Interpreter
    from pinchpoint.runtime.kill_switch import KillSwitch
    from pinchpoint.runtime.run_loop import open_control, resolve_preset

    path = tmp_path / "state.json"
    # left behind by an earlier default run
    ipc_state.write_state(path, enabled=True, slides=False)

    preset = resolve_preset(Namespace(preset="slides", slides=False))
    state = open_control(preset, path=path)
    assert state.slides_enabled()
    assert ipc_state.read_state(path)["slides"] is True

    interp = Interpreter(preset)
    ks = KillSwitch(state=state, interp=interp, device=LogPointer())
    ks.guard(t_ms=0)
    assert interp.swipe.enabled

    # OFF -> ON keeps swipes, the file still says slides
    state.set_enabled(False)
    ks.guard(t_ms=10)
    ipc_state.sync_into(state, path=path)
    ks.guard(t_ms=20)
    assert interp.active
    assert interp.swipe.enabled


def test_default_preset_keeps_slides_chosen_elsewhere(tmp_path):
    from argparse import Namespace

    from pinchpoint.runtime.run_loop import open_control, resolve_preset

    path = tmp_path / "state.json"
    ipc_state.write_state(path, enabled=True, slides=True)
    state = open_control(resolve_preset(Namespace(preset="default", slides=False)), path=path)
    assert state.slides_enabled()


def test_toggle_slides_starts_from_the_file(tmp_path):
    path = tmp_path / "state.json"
    state = ControlState(_slides=False)
    # another process (the webcam window) switched slides on
    ipc_state.set_slides(True, path=path)

    assert ipc_state.toggle_slides(state, path=path) is False
    assert ipc_state.read_state(path)["slides"] is False
    assert not state.slides_enabled()

    assert ipc_state.toggle_slides(state, path=path) is True
    assert ipc_state.read_state(path)["slides"] is True

import time
from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from ui_timer import CountdownTab


@pytest.fixture
def root():
    try:
        root = tk.Tk()
    except tk.TclError as exc:  # pragma: no cover - depends on CI environment
        pytest.skip(f"Tk not available: {exc}")
    root.withdraw()
    yield root
    root.destroy()


def pump(root, seconds: float) -> None:
    deadline = time.time() + seconds
    while time.time() < deadline:
        root.update()
        time.sleep(0.01)


def test_tab_counts_down_in_input_shape(root):
    tab = CountdownTab(root, "00:00:02", granularity=20)
    assert tab.time_var.get() == "00:00:02"

    tab.on_start()
    assert tab.timer.running
    pump(root, 0.5)

    assert tab.time_var.get() == "00:00:00"
    assert tab.status_var.get() == "Time's up!"
    assert not tab.timer.running


def test_reset_builds_a_new_timer(root):
    tab = CountdownTab(root, "00:01", granularity=10)
    first = tab.timer
    tab.on_start()
    pump(root, 0.2)
    tab.duration_var.set("00:03")
    tab.on_reset()
    assert tab.timer is not first
    assert tab.time_var.get() == "00:03"


def test_reset_while_running_is_refused(root):
    tab = CountdownTab(root, "00:05", granularity=1000)
    tab.on_start()
    running = tab.timer
    tab.on_reset()
    assert tab.timer is running
    assert "can not be cancelled" in tab.status_var.get()


def test_bad_duration_disables_start(root):
    tab = CountdownTab(root, "5:9")
    assert tab.timer is None
    assert "Unsupported time format" in tab.status_var.get()
    assert str(tab.btn_start.cget("state")) == "disabled"


def test_space_in_duration_entry_does_not_start(root):
    tab = CountdownTab(root, "00:05", granularity=1000)
    tab._on_space(SimpleNamespace(widget=tab.duration_entry))
    assert not tab.timer.running
    assert str(tab.btn_start.cget("state")) == "normal"


def test_space_elsewhere_starts(root):
    tab = CountdownTab(root, "00:05", granularity=1000)
    tab._on_space(SimpleNamespace(widget=tab.frame))
    assert tab.timer.running

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from main_window import MainWindow  # noqa: E402
from session import WheelSession  # noqa: E402
from spin import SpinState  # noqa: E402


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(app, monkeypatch):
    w = MainWindow(WheelSession(rng=random.Random(9)))
    shown = []
    monkeypatch.setattr(w, "show_winner", shown.append)
    w.shown_winners = shown
    yield w
    w.wheel.timer.stop()
    w.deleteLater()


def _add(window, text):
    window.name_input.setText(text)
    window.add_choice()


def test_add_from_input_box(window):
    assert not window.spin_btn.isEnabled()

    _add(window, "Pizza")
    _add(window, "Sushi")

    assert [c.label for c in window.session.choices] == ["Pizza", "Sushi"]
    assert window.choice_list.count() == 2
    assert window.name_input.text() == ""
    assert window.spin_btn.isEnabled()


def test_paint_lays_out_the_wheel(window):
    _add(window, "Pizza")
    _add(window, "Sushi")
    window.wheel.resize(400, 400)

    window.wheel.grab()

    segments = window.session.segments
    assert len(segments) == 2
    side = min(window.wheel.width(), window.wheel.height())
    assert window.session.radius == pytest.approx(side / 2 - 35)
    assert all(s.font_size >= 10 for s in segments)


def test_empty_wheel_paints_placeholder(window):
    window.wheel.resize(400, 400)
    window.wheel.grab()
    assert window.session.segments == []


def test_spin_runs_to_a_winner(window):
    _add(window, "Pizza")
    _add(window, "Sushi")
    window.wheel.resize(400, 400)
    window.wheel.grab()

    window.spin()
    assert window.wheel.timer.isActive()
    assert not window.spin_btn.isEnabled()
    assert not window.add_btn.isEnabled()

    for _ in range(100_000):
        if not window.session.spinning:
            break
        window.wheel.physics_update()

    assert not window.wheel.timer.isActive()
    assert window.session.state is SpinState.RESOLVED
    assert window.shown_winners == [window.session.winner.label]


def test_clear_stops_everything(window):
    _add(window, "Pizza")
    window.spin()

    window.clear_wheel()

    assert window.session.choices == []
    assert not window.wheel.timer.isActive()
    assert window.choice_list.count() == 0


def test_list_buttons_edit_weights(window):
    _add(window, "Pizza")
    cid = window.session.choices[0].id

    window.choice_list.on_increment(cid)
    window.choice_list.on_increment(cid)
    window.choice_list.on_decrement(cid)

    assert window.session.registry.get(cid).weight == 2

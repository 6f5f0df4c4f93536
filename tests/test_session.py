import math
import random

import pytest

from constants import MAX_CHOICES, MAX_SEGMENT_WEIGHT
from session import WheelSession
from spin import SpinState


@pytest.fixture
def session():
    s = WheelSession(rng=random.Random(42))
    s.set_geometry((300, 300), 200)
    return s


def _spin_to_end(session, limit=100_000):
    assert session.start_spin()
    ticks = 0
    while session.tick():
        ticks += 1
        assert ticks < limit


def test_add_and_remove_reset_rotation(session):
    a = session.add_choice("A")
    assert session.rotation == pytest.approx(math.pi)

    session.add_choice("B")
    session.add_choice("C")
    assert session.rotation == pytest.approx(math.pi / 3)

    session.remove_choice(a)
    assert session.rotation == pytest.approx(math.pi / 2)


def test_rename_and_weight_keep_rotation(session):
    cid = session.add_choice("A")
    session.add_choice("B")
    session.engine.rotation = 1.23

    session.rename_choice(cid, "AA")
    session.increment_weight(cid)

    assert session.rotation == 1.23
    assert session.registry.get(cid).label == "AA"


def test_add_at_capacity_signals_full(session):
    for i in range(MAX_CHOICES):
        session.add_choice(f"c{i}")

    assert not session.can_add()
    assert session.add_choice("X") is None
    assert len(session.choices) == MAX_CHOICES


def test_weight_buttons_clamp(session):
    cid = session.add_choice("A")
    session.decrement_weight(cid)
    assert session.registry.get(cid).weight == 1

    for _ in range(MAX_SEGMENT_WEIGHT + 3):
        session.increment_weight(cid)
    assert session.registry.get(cid).weight == MAX_SEGMENT_WEIGHT

    session.increment_weight(cid)
    assert session.registry.get(cid).weight == MAX_SEGMENT_WEIGHT


def test_blank_input_is_ignored(session):
    assert session.add_choice("  \n ") is None
    cid = session.add_choice("Tacos\nnight")
    session.rename_choice(cid, "   ")

    assert [c.label for c in session.choices] == ["Tacos night"]


def test_start_spin_on_empty_wheel_is_a_noop(session):
    assert session.start_spin() is False
    assert session.state is SpinState.IDLE
    assert not session.can_spin()


def test_edits_are_ignored_while_spinning(session):
    a = session.add_choice("A")
    session.add_choice("B")
    assert session.start_spin()

    assert session.add_choice("C") is None
    session.remove_choice(a)
    session.rename_choice(a, "Z")
    session.increment_weight(a)

    assert [(c.label, c.weight) for c in session.choices] == [("A", 1), ("B", 1)]
    assert session.start_spin() is False


def test_spin_resolves_to_a_winner(session):
    session.add_choice("A")
    session.add_choice("B")
    session.add_choice("C")

    _spin_to_end(session)

    assert session.state is SpinState.RESOLVED
    assert session.winner in session.choices
    assert not session.spinning


def test_acknowledge_keeps_choices(session):
    session.add_choice("A")
    session.add_choice("B")
    _spin_to_end(session)

    session.acknowledge_winner()

    assert session.state is SpinState.IDLE
    assert session.winner is None
    assert len(session.choices) == 2


def test_remove_winner_drops_the_choice(session):
    session.add_choice("A")
    session.add_choice("B")
    _spin_to_end(session)
    winner_id = session.winner.id

    session.remove_winner()

    assert winner_id not in session.registry
    assert session.state is SpinState.IDLE
    assert session.winner is None
    assert session.rotation == pytest.approx(math.pi)


def test_removing_winner_from_list_clears_result(session):
    session.add_choice("A")
    session.add_choice("B")
    _spin_to_end(session)

    session.remove_choice(session.winner.id)

    assert session.winner is None
    assert session.state is SpinState.IDLE


def test_removing_last_choice_does_not_crash(session):
    cid = session.add_choice("A")
    session.remove_choice(cid)

    assert session.rotation == 0.0
    assert session.layout() == []
    assert session.tick() is False


def test_clear_all(session):
    session.add_choice("A")
    session.add_choice("B")
    session.start_spin()
    session.tick()

    session.clear_all()

    assert session.choices == []
    assert session.state is SpinState.IDLE
    assert session.rotation == 0.0
    assert session.add_choice("C") == 3


def test_layout_scenario(session):
    session.add_choice("A")
    session.add_choice("B")
    c = session.add_choice("C")
    session.increment_weight(c)

    segments = session.layout()

    assert [s.label for s in segments] == ["A", "B", "C"]
    assert [s.span for s in segments] == pytest.approx([math.pi / 2, math.pi / 2, math.pi])
    assert segments[0].start == pytest.approx(session.rotation)
    assert session.segments is segments
    assert session.pointer == (500.0, 300.0)

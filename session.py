import logging

from choices import ChoiceRegistry, clean_label
from constants import MAX_CHOICES
from layout import lay_out, pointer_position
from spin import SpinEngine

logger = logging.getLogger(__name__)


class WheelSession:
    """Single owner of the choice registry and the spin engine.

    The presentation layer holds one session and talks to the wheel only
    through it. Edits to the choices are ignored while the wheel spins.
    """

    def __init__(self, rng=None, max_choices=MAX_CHOICES):
        self.registry = ChoiceRegistry(max_choices)
        self.engine = SpinEngine(rng)
        self.center = (0.0, 0.0)
        self.radius = 0.0
        self.segments = []
        self.registry.subscribe(self._on_choices_changed)

    def _on_choices_changed(self, registry):
        self.engine.reset_rotation(len(registry))
        winner = self.engine.winner
        if winner is not None and winner.id not in registry:
            self.engine.forget_winner()

    # State
    @property
    def choices(self):
        return self.registry.choices

    @property
    def spinning(self):
        return self.engine.spinning

    @property
    def state(self):
        return self.engine.state

    @property
    def winner(self):
        return self.engine.winner

    @property
    def rotation(self):
        return self.engine.rotation

    @property
    def pointer(self):
        return pointer_position(self.center, self.radius)

    def can_add(self):
        return not self.spinning and not self.registry.is_full()

    def can_spin(self):
        return not self.spinning and not self.registry.is_empty()

    def can_edit(self):
        return not self.spinning

    # User intents
    def add_choice(self, text):
        if not self.can_add():
            return None
        label = clean_label(text)
        if not label:
            return None
        return self.registry.add(label)

    def remove_choice(self, choice_id):
        if self.can_edit():
            self.registry.remove(choice_id)

    def rename_choice(self, choice_id, text):
        if not self.can_edit():
            return
        label = clean_label(text)
        if label:
            self.registry.rename(choice_id, label)

    def increment_weight(self, choice_id):
        if self.can_edit():
            self.registry.set_weight(choice_id, 1)

    def decrement_weight(self, choice_id):
        if self.can_edit():
            self.registry.set_weight(choice_id, -1)

    def start_spin(self):
        return self.engine.start_spin(len(self.registry))

    def acknowledge_winner(self):
        self.engine.acknowledge()

    def remove_winner(self):
        winner = self.engine.winner
        if winner is None or self.spinning:
            return
        self.registry.remove(winner.id)
        self.engine.forget_winner()

    def clear_all(self):
        """Empty the wheel; the only way to stop a spin early."""
        logger.info("Clearing the wheel")
        self.registry.clear()
        self.engine.clear()
        self.segments = []

    # Frame
    def set_geometry(self, center, radius):
        self.center = (float(center[0]), float(center[1]))
        self.radius = float(radius)

    def tick(self):
        """Advance the spin by one frame; True while more frames are needed."""
        return self.engine.tick(self.registry.choices, self.center, self.radius)

    def layout(self, measure_text=None):
        self.segments = lay_out(
            self.registry.choices, self.engine.rotation, self.radius, self.center, measure_text
        )
        return self.segments

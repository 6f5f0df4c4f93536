import logging

from constants import MAX_CHOICES, MAX_INPUT_SIZE, MAX_SEGMENT_WEIGHT

logger = logging.getLogger(__name__)


def clean_label(text):
    """Normalize user input into a single-line label."""
    label = text.strip().replace("\r\n", " ").replace("\n", " ")
    return label[:MAX_INPUT_SIZE]


class Choice:
    """One weighted option on the wheel."""

    def __init__(self, choice_id, label):
        self.id = choice_id
        self.label = label
        self.weight = 1
        # Written by every layout pass
        self.centroid = (0.0, 0.0)

    def __repr__(self):
        return f"Choice(id={self.id}, label={self.label!r}, weight={self.weight})"


class ChoiceRegistry:
    """Ordered list of choices with never-reused ids.

    Listeners registered with ``subscribe`` are called after every change
    to the composition of the registry (add, remove, clear). Renames and
    weight changes leave the layout order intact and are not broadcast.
    """

    def __init__(self, max_choices=MAX_CHOICES):
        self.max_choices = max_choices
        self.choices = []
        self.current_id = 0
        self._listeners = []

    def __len__(self):
        return len(self.choices)

    def __iter__(self):
        return iter(self.choices)

    def __contains__(self, choice_id):
        return self.get(choice_id) is not None

    def subscribe(self, callback):
        self._listeners.append(callback)

    def _notify(self):
        for callback in self._listeners:
            callback(self)

    def is_full(self):
        return len(self.choices) >= self.max_choices

    def is_empty(self):
        return not self.choices

    def get(self, choice_id):
        return next((c for c in self.choices if c.id == choice_id), None)

    def total_weight(self):
        return sum(c.weight for c in self.choices)

    def add(self, label):
        """Append a choice and return its id, or None when the registry is full."""
        if self.is_full():
            logger.info("Registry full (%d choices), rejecting %r", self.max_choices, label)
            return None
        self.current_id += 1
        choice = Choice(self.current_id, label)
        self.choices.append(choice)
        logger.debug("Added %r", choice)
        self._notify()
        return choice.id

    def remove(self, choice_id):
        choice = self.get(choice_id)
        if choice is None:
            logger.debug("Remove ignored, unknown id %s", choice_id)
            return
        self.choices.remove(choice)
        logger.debug("Removed %r", choice)
        self._notify()

    def rename(self, choice_id, new_label):
        choice = self.get(choice_id)
        if choice is not None:
            choice.label = new_label

    def set_weight(self, choice_id, delta):
        """Shift a weight by ``delta``, clamped into [1, MAX_SEGMENT_WEIGHT]."""
        choice = self.get(choice_id)
        if choice is None:
            return
        choice.weight = max(1, min(MAX_SEGMENT_WEIGHT, choice.weight + delta))

    def clear(self):
        # current_id is kept so ids stay unique for the whole session
        self.choices = []
        self._notify()

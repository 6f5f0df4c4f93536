import enum
import logging
import math
import random

from constants import BREAKING_PERCENT, MIN_SPEED, SPIN_VELOCITY_MAX, SPIN_VELOCITY_MIN
from layout import nearest_choice, pointer_position, update_centroids

logger = logging.getLogger(__name__)


class SpinState(enum.Enum):
    IDLE = "idle"
    SPINNING = "spinning"
    RESOLVED = "resolved"


class SpinEngine:
    """Rotation, velocity and winner of the wheel.

    Driven by one ``tick()`` per rendered frame. Transitions that do not
    apply to the current state are ignored rather than raised.
    """

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self.rotation = 0.0
        self.velocity = 0.0
        self.state = SpinState.IDLE
        self.winner = None

    @property
    def spinning(self):
        return self.state is SpinState.SPINNING

    def start_spin(self, choice_count):
        """Start spinning; returns False when the spin is rejected.

        Also accepted from RESOLVED: an unacknowledged winner is dropped.
        """
        if self.spinning:
            logger.debug("Spin ignored, already spinning")
            return False
        if choice_count == 0:
            logger.debug("Spin ignored, no choices")
            return False

        self.winner = None
        self.velocity = self.rng.uniform(SPIN_VELOCITY_MIN, SPIN_VELOCITY_MAX)
        self.state = SpinState.SPINNING
        logger.info("Spin started, velocity %.4f rad/tick", self.velocity)
        return True

    def tick(self, choices, center, radius):
        """Advance one frame.

        Returns True while the wheel needs another tick. On the tick that
        stops the wheel, centroids are refreshed at the resting rotation and
        the winner is the choice nearest to the pointer.
        """
        if not self.spinning:
            return False

        self.rotation += self.velocity
        self.velocity *= BREAKING_PERCENT

        if abs(self.velocity) >= MIN_SPEED:
            return True

        self.velocity = 0.0
        update_centroids(choices, self.rotation, radius, center)
        self.winner = nearest_choice(choices, pointer_position(center, radius))
        if self.winner is None:
            self.state = SpinState.IDLE
        else:
            self.state = SpinState.RESOLVED
            logger.info("Wheel stopped on %r", self.winner)
        return False

    def acknowledge(self):
        if self.state is not SpinState.RESOLVED:
            return
        self.winner = None
        self.state = SpinState.IDLE

    def forget_winner(self):
        if self.spinning:
            return
        self.winner = None
        self.state = SpinState.IDLE

    def reset_rotation(self, choice_count):
        """Park the wheel so the first segment is not flush with the pointer."""
        if self.spinning:
            return
        self.rotation = math.pi / choice_count if choice_count else 0.0

    def clear(self):
        self.rotation = 0.0
        self.velocity = 0.0
        self.winner = None
        self.state = SpinState.IDLE

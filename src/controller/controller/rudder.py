import numpy as np


class RudderMapper:
    """
    Saturating proportional mapping from a desired heading change to a rudder actuation.

    No integral or derivative term: the turn rate is clipped before it is mapped, so the
    output stays in [-1, 1] and there is nothing to wind up.

    Unit conventions:
        Input: desired relative heading in DEGREES, clockwise positive
        Output: rudder actuation in [-1, 1]
    """

    def __init__(self, turn_rate_gain: float = 2.0, max_turn_rate: float = 90.0, max_rudder: float = 1.0):
        """
        Args:
            turn_rate_gain: Degrees of turn rate per degree of heading error.
            max_turn_rate: Turn rate saturation in degrees. 90 maps to a full rudder.
            max_rudder: Rudder actuation at full deflection.
        """
        self.turn_rate_gain = turn_rate_gain
        self.max_turn_rate = max_turn_rate
        self.max_rudder = max_rudder

    def compute_action(self, desired_relative_heading: float) -> float:
        """
        Compute the rudder command.

        Args:
            desired_relative_heading: Heading change in degrees.

        Returns:
            rudder: Rudder command in [-max_rudder, max_rudder]. NaN input gives NaN.
        """
        turn_rate = np.clip(self.turn_rate_gain * desired_relative_heading, -self.max_turn_rate, self.max_turn_rate)
        return float(np.sin(np.radians(turn_rate)) * self.max_rudder)


def rudder_command(desired_relative_heading: float) -> float:
    """Rudder command with the default gain and saturation."""
    return RudderMapper().compute_action(desired_relative_heading)

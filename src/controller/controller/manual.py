"""This module contains a pass-through pilot driven by a remote operator."""

import logging

import numpy as np

from controller.utils import BoatTelemetry
from controller.utils import PilotCommand


_logger = logging.getLogger(__name__)


class ManualPilot:
    """
    Replays the latest command received from an operator, e.g. a radio control.

    Until the first command arrives the rudder is centered.
    """

    def __init__(self, logger=None):
        self.logger = logger or _logger
        self._last_command = PilotCommand(rudder=0.0, sail=0.0)

    @property
    def last_command(self) -> PilotCommand:
        return self._last_command

    def command(self, rudder: float, sail: float = 0.0, action: str = 'move') -> None:
        """
        Store an operator command.

        Args:
            rudder: Rudder actuation, clipped to [-1, 1].
            sail: Sail actuation.
            action: Only ``"move"`` commands change the stored command.
        """
        if action != 'move':
            self.logger.warning(f"Ignoring operator command with action '{action}'")
            return
        self._last_command = PilotCommand(rudder=float(np.clip(rudder, -1.0, 1.0)), sail=sail)

    def step(self, telemetry: BoatTelemetry) -> PilotCommand:
        """Returns the latest operator command, whatever the boat state."""
        return self._last_command

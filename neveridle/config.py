"""
Run configuration: defaults, the option builder and delay normalization.
"""

import argparse
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .keys import lookup_key
from .logger import Logger

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_CONFIG = {
    "send_default_move": True,
    "send_key": False,
    "key_code": "F15",  # a key almost no application reacts to
    "run_once": False,
    "min_delay": 1,
    "max_delay": 30,
    "use_random_delay": True,
    "verbosity": 0,
}

# Field order used by the "Option values" section of --help.
OPTION_FIELDS = (
    "send_default_move",
    "send_key",
    "key_code",
    "run_once",
    "min_delay",
    "max_delay",
    "use_random_delay",
    "verbosity",
)

# Delays are signed 32-bit seconds; larger values cannot be slept on.
INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def normalize_delays(min_delay: int, max_delay: int) -> Tuple[int, int]:
    """Return (min, max) as non-negative integers with min <= max"""
    low, high = sorted((max(0, abs(min_delay)), max(0, abs(max_delay))))
    return low, high


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass(frozen=True)
class RunConfiguration:
    """Settings read by the idle loop; never changed once built"""

    send_default_move: bool = DEFAULT_CONFIG["send_default_move"]
    send_key: bool = DEFAULT_CONFIG["send_key"]
    key_code: str = DEFAULT_CONFIG["key_code"]
    run_once: bool = DEFAULT_CONFIG["run_once"]
    min_delay: int = DEFAULT_CONFIG["min_delay"]
    max_delay: int = DEFAULT_CONFIG["max_delay"]
    use_random_delay: bool = DEFAULT_CONFIG["use_random_delay"]
    verbosity: int = DEFAULT_CONFIG["verbosity"]


class OptionsBuilder(argparse.Namespace):
    """
    Namespace the option parser writes into.

    Starts from DEFAULT_CONFIG; build() normalizes the delays and freezes
    the result into a RunConfiguration.
    """

    def __init__(self, logger: Logger = None, **overrides):
        values: Dict[str, Any] = dict(DEFAULT_CONFIG)
        values.update(overrides)
        values.setdefault("help", False)
        super().__init__(**values)
        self._logger = logger or Logger()

    def set_key_code(self, name: str):
        """Select the key to press; unknown names keep the previous key"""
        if not name or not name.strip():
            return
        try:
            self.key_code = lookup_key(name)
        except KeyError as exc:
            self._logger.warning(exc.args[0])
            self._logger.warning(f"Key code reverts to {self.key_code}.")
            return
        self.send_key = True

    def set_delay(self, field: str, text: str, label: str):
        """Parse a delay in seconds; unparseable text keeps the previous value"""
        try:
            value = int(text)
        except (TypeError, ValueError):
            self._logger.warning(f"Input string '{text}' was not in a correct format.")
            self._logger.warning(f"{label} reverts to {getattr(self, field)}.")
            return
        if not INT32_MIN <= value <= INT32_MAX:
            self._logger.warning("Value was either too large or too small for an Int32.")
            self._logger.warning(f"{label} reverts to {getattr(self, field)}.")
            return
        setattr(self, field, value)

    def option_values(self) -> Tuple[Tuple[str, Any], ...]:
        return tuple((name, getattr(self, name)) for name in OPTION_FIELDS)

    def build(self) -> RunConfiguration:
        """Validate the accumulated values and return the frozen configuration"""
        min_delay, max_delay = normalize_delays(self.min_delay, self.max_delay)
        return RunConfiguration(
            send_default_move=bool(self.send_default_move),
            send_key=bool(self.send_key),
            key_code=lookup_key(self.key_code),
            run_once=bool(self.run_once),
            min_delay=int(min_delay),
            max_delay=int(max_delay),
            use_random_delay=bool(self.use_random_delay),
            verbosity=max(0, int(self.verbosity)),
        )

"""
Idle prevention loop.

Each cycle sends the configured events, then either stops (run once) or
sleeps for the next delay and goes again.
"""

import random
import time
from typing import Callable, List, Optional

from .config import RunConfiguration
from .injection import EmissionResult, InputInjector, emit_key_press, emit_move
from .logger import Logger


class IdlePreventer:
    """Main event loop keeping the session awake"""

    def __init__(
        self,
        config: RunConfiguration,
        injector: InputInjector,
        logger: Optional[Logger] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.injector = injector
        self.logger = logger or Logger(config.verbosity)
        self.sleep = sleep
        self.rng = rng or random.Random()
        self.cycles = 0

    def report(self, result: EmissionResult):
        """Log an emission outcome according to verbosity"""
        if result.ok:
            self.logger.status(result.message, level=2)
        else:
            self.logger.error(result.message, level=1)

    def run_cycle(self) -> List[EmissionResult]:
        """Send one round of events; failures never stop the other event"""
        results = []
        if self.config.send_default_move:
            results.append(emit_move(self.injector, 0, 0))
            self.report(results[-1])
        if self.config.send_key:
            results.append(emit_key_press(self.injector, self.config.key_code))
            self.report(results[-1])
        self.cycles += 1
        return results

    def next_delay(self) -> int:
        """Seconds to wait before the next cycle"""
        config = self.config
        if not config.use_random_delay:
            return config.max_delay
        if config.min_delay >= config.max_delay:
            return config.max_delay
        # Upper bound is exclusive.
        return self.rng.randrange(config.min_delay, config.max_delay)

    def run(self) -> int:
        """Loop until run_once completes; returns the number of cycles"""
        while True:
            self.run_cycle()
            if self.config.run_once:
                break
            delay = self.next_delay()
            self.logger.status(f"Delay for {delay} seconds before sending next event.")
            self.sleep(delay)
        return self.cycles

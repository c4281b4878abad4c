"""The emulator loop and the command-line entry point."""

import logging
import sys
import time

from .bus import Bus
from .cart import Cartridge, CartridgeError
from .common import EmulatorError
from .cpu import CPU

log = logging.getLogger(__name__)

_PAUSE_DELAY = 0.01


class Emulator:
    """Ties the cartridge, bus and CPU together and runs them."""

    def __init__(self, cart):
        self.cart = cart
        self.bus = Bus(cart)
        self.cpu = CPU(self.bus, on_cycles=self.cycles)
        self.paused = False
        self.running = False
        self.ticks = 0
        self.cycle_count = 0

    def cycles(self, cpu_cycles):
        """Account for ``cpu_cycles`` machine cycles spent by the CPU."""
        self.cycle_count += cpu_cycles

    def run(self, max_steps=None):
        """Run until stopped or ``max_steps`` instructions; return the tick count."""
        self.running = True
        self.paused = False
        self.ticks = 0
        try:
            while self.running:
                if self.paused:
                    time.sleep(_PAUSE_DELAY)
                    continue
                if not self.cpu.step():
                    log.debug("CPU Stopped")
                    break
                self.ticks += 1
                if max_steps is not None and self.ticks >= max_steps:
                    break
        finally:
            self.running = False
        return self.ticks


def main(argv=None):
    """Load the ROM named on the command line and run it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: viniboy <rom_file>")
        return -1

    path = args[0]
    try:
        cart = Cartridge.load(path)
    except CartridgeError as exc:
        print(exc)
        print(f"Failed to load ROM file: {path}")
        return -2

    try:
        Emulator(cart).run()
    except EmulatorError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0
"""The address bus that routes reads and writes to the right component."""

from .common import NotYetImplementedError

# Layout of the 16-bit address space, as (first, last, description).
_REGIONS = (
    (0x0000, 0x3FFF, "fixed ROM bank"),
    (0x4000, 0x7FFF, "banked ROM"),
    (0x8000, 0x97FF, "tile data"),
    (0x9800, 0x9BFF, "first background map"),
    (0x9C00, 0x9FFF, "second background map"),
    (0xA000, 0xBFFF, "external cartridge RAM"),
    (0xC000, 0xCFFF, "work RAM"),
    (0xD000, 0xDFFF, "banked work RAM"),
    (0xE000, 0xFDFF, "mirror of work RAM"),
    (0xFE00, 0xFE9F, "sprite attribute table"),
    (0xFEA0, 0xFEFF, "unusable area"),
    (0xFF00, 0xFF7F, "hardware registers"),
    (0xFF80, 0xFFFE, "high RAM"),
)

_ROM_END = 0x8000


def _region_name(addr):
    return next(
        (name for first, last, name in _REGIONS if first <= addr <= last),
        "unmapped",
    )


class Bus:
    """Memory map of the machine."""

    def __init__(self, cart):
        self.cart = cart

    def read(self, addr):
        """Read one byte from the address space."""
        if addr < _ROM_END:
            return self.cart.read(addr)
        raise NotYetImplementedError(
            f"NOT YET IMPLEMENTED: read at {addr:#06x} ({_region_name(addr)})"
        )

    def write(self, addr, value):
        """Write one byte to the address space."""
        if addr < _ROM_END:
            self.cart.write(addr, value)
            return
        raise NotYetImplementedError(
            f"NOT YET IMPLEMENTED: write at {addr:#06x} ({_region_name(addr)})"
        )
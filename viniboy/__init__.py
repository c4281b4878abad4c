"""An early Game Boy emulator core: cartridge, bus, CPU fetch/decode loop and runner."""

__version__ = "0.1.0"
__all__ = ["bus", "cart", "common", "cpu", "emu", "instructions"]
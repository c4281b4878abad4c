# viniboy

viniboy is the beginning of a Game Boy emulator. It can currently do the following:

- Load a cartridge ROM image and decode its header: title, cartridge type, licensee, ROM and RAM size codes, and the header checksum.
- Map the ROM area (`0x0000`–`0x7FFF`) onto the address bus.
- Run the CPU's fetch and operand-decode loop for a small set of opcodes.

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install .[test]
pytest
```

## Command line

```
viniboy path/to/game.gb
```

This command loads the ROM and starts stepping the CPU from address `0x0100`. The exit status depends on what happens:

- No ROM path given: it prints a usage message and returns `-1`.
- The file cannot be opened, or is too small to hold a header: it prints the problem and `Failed to load ROM file: <path>`, then returns `-2`.
- The loop reaches something that is not emulated yet, such as an unknown opcode or an access outside the ROM area: it prints the error to standard error and returns `1`.

The loop has no other way to stop. On a real game it ends as soon as it meets such an error.

Diagnostic output goes through the standard `logging` module at DEBUG level. This covers the cartridge summary and each executed opcode with its address. It uses the loggers `viniboy.cart`, `viniboy.cpu` and `viniboy.emu`.

## Library use

```python
from viniboy.cart import Cartridge
from viniboy.bus import Bus
from viniboy.emu import Emulator

cart = Cartridge.load("game.gb")      # or Cartridge.from_bytes(data, "name")
print(cart.header.title, cart.type_name(), cart.license_name())
print("header checksum ok:", cart.checksum_ok())

bus = Bus(cart)
first_opcode = bus.read(0x100)

emu = Emulator(cart)
ticks = emu.run(max_steps=10)   # step the CPU at most ten times
print(ticks, emu.cycle_count)
```

### Modules

- `viniboy.cart` holds the ROM image and its header.
  - `RomHeader.from_bytes(data)` parses the header found at ROM offset `0x0100`.
  - `Cartridge.load(path)` and `Cartridge.from_bytes(data, filename)` build a cartridge. Both raise `CartridgeError` when the file cannot be read or the image is smaller than the header.
  - `Cartridge.read(addr)` returns one ROM byte. It raises `CartridgeError` outside the image.
  - `Cartridge.write(addr, value)` always raises `NotYetImplementedError`.
  - `type_name()` and `license_name()` return `"UNKNOWN"` for codes that are not in the tables.
- `viniboy.bus.Bus(cart)` is the memory map. `read` and `write` below `0x8000` go to the cartridge. Any other address raises `NotYetImplementedError`, and the error message names the memory region.
- `viniboy.cpu` provides the processor.
  - `Registers` is a dataclass holding `a`, `f`, `b`, `c`, `d`, `e`, `h`, `l`, `pc` and `sp`. `read(reg)` takes a `RegisterType`. The pairs `AF`, `BC`, `DE` and `HL` combine the high and low bytes.
  - `CPU(bus, on_cycles)` starts with `pc = 0x100`. `step()` fetches the opcode and its operands, unless `halted` is set, and returns `True`.
  - `on_cycles` is called with `1` for every operand byte read.
  - An unknown opcode raises `UnknownInstructionError`. An unhandled addressing mode raises `UnknownAddressModeError`.
- `viniboy.instructions` holds the instruction table.
  - It defines the enums `InstructionType`, `AddressMode`, `RegisterType` and `ConditionType`, and the frozen dataclass `Instruction`.
  - `instruction_by_opcode(opcode)` returns the `Instruction` for an opcode, or `None` when the opcode is unknown. It raises `ValueError` outside `0..0xFF`.
  - The known opcodes are `0x00` (NOP), `0x05` (DEC B), `0x0E` (LD C, d8), `0xAF` (XOR A) and `0xC3` (JP a16).
- `viniboy.emu` holds the emulator.
  - `Emulator(cart)` wires the cartridge, bus and CPU together.
  - `run(max_steps=None)` steps until stopped or until `max_steps` instructions have run, and returns the tick count.
  - `cycles(n)` adds to `cycle_count`.
  - `main(argv=None)` is the command-line entry point.
- `viniboy.common` contains the bit helpers `bit`, `set_bit` and `between`, and the base error `EmulatorError` with its subclass `NotYetImplementedError`.

## What it does not do yet

viniboy does not play games.

- Instructions are decoded but not executed. Registers do not change apart from `pc` moving past the opcode and its operands, and `JP` does not jump.
- There is no video RAM, work RAM, I/O or high RAM behind the bus.
- There are no memory bank controllers.
- There is no display window, sound, joypad input or timer.
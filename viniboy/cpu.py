"""The CPU: registers, instruction fetch and operand fetch."""

import logging
from dataclasses import dataclass

from .common import EmulatorError
from .instructions import AddressMode, RegisterType, instruction_by_opcode

log = logging.getLogger(__name__)

START_ADDRESS = 0x100

_SINGLE = {
    RegisterType.A: "a",
    RegisterType.F: "f",
    RegisterType.B: "b",
    RegisterType.C: "c",
    RegisterType.D: "d",
    RegisterType.E: "e",
    RegisterType.H: "h",
    RegisterType.L: "l",
    RegisterType.SP: "sp",
    RegisterType.PC: "pc",
}

_PAIRS = {
    RegisterType.AF: ("a", "f"),
    RegisterType.BC: ("b", "c"),
    RegisterType.DE: ("d", "e"),
    RegisterType.HL: ("h", "l"),
}


class UnknownInstructionError(EmulatorError):
    """Raised when the CPU fetches an opcode it does not know."""

    def __init__(self, opcode):
        super().__init__(f"Unknown Instruction: {opcode:02X}")
        self.opcode = opcode


class UnknownAddressModeError(EmulatorError):
    """Raised when an instruction uses an addressing mode that is not handled."""

    def __init__(self, mode):
        super().__init__(f"Unknown Addressing Mode: {mode!r}")
        self.mode = mode


@dataclass
class Registers:
    """CPU registers; ``f`` holds the flags (bit 7 Z, 6 N, 5 H, 4 C)."""

    a: int = 0
    f: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    h: int = 0
    l: int = 0  # noqa: E741
    pc: int = 0
    sp: int = 0

    def read(self, reg):
        """Value of a register; pairs combine the high and low 8-bit halves."""
        if reg in _SINGLE:
            return getattr(self, _SINGLE[reg])
        if reg in _PAIRS:
            high, low = _PAIRS[reg]
            return (getattr(self, high) << 8) | getattr(self, low)
        return 0


class CPU:
    """Fetches and decodes instructions from the bus."""

    def __init__(self, bus, on_cycles=None):
        self.bus = bus
        self._on_cycles = on_cycles if on_cycles is not None else (lambda cycles: None)
        self.registers = Registers(pc=START_ADDRESS)
        self.cur_opcode = 0
        self.cur_inst = None
        self.fetched_data = 0
        self.mem_dest = 0
        self.dest_is_mem = False
        self.halted = False
        self.stepping = False

    def read_reg(self, reg):
        """Value of register ``reg``."""
        return self.registers.read(reg)

    def step(self):
        """Run one instruction unless halted; return True to keep running."""
        if not self.halted:
            pc = self.registers.pc
            self._fetch_instruction()
            self._fetch_data()
            log.debug("Executing Instruction: %02X    PC: %04X", self.cur_opcode, pc)
        return True

    def _read_pc_byte(self):
        value = self.bus.read(self.registers.pc)
        self.registers.pc = (self.registers.pc + 1) & 0xFFFF
        return value

    def _fetch_instruction(self):
        self.cur_opcode = self._read_pc_byte()
        self.cur_inst = instruction_by_opcode(self.cur_opcode)
        if self.cur_inst is None:
            raise UnknownInstructionError(self.cur_opcode)

    def _fetch_data(self):
        self.mem_dest = 0
        self.dest_is_mem = False
        mode = self.cur_inst.mode

        if mode == AddressMode.IMP:
            return
        if mode == AddressMode.R:
            self.fetched_data = self.read_reg(self.cur_inst.reg_1)
            return
        if mode == AddressMode.R_D8:
            self.fetched_data = self._read_pc_byte()
            self._on_cycles(1)
            return
        if mode == AddressMode.D16:
            lo = self._read_pc_byte()
            self._on_cycles(1)
            hi = self._read_pc_byte()
            self._on_cycles(1)
            self.fetched_data = lo | (hi << 8)
            return
        raise UnknownAddressModeError(mode)
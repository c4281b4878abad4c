import pytest

from viniboy.cpu import CPU, Registers, UnknownInstructionError
from viniboy.instructions import InstructionType, RegisterType


class FakeBus:
    def __init__(self, program, origin=0x100):
        self.memory = bytearray(0x10000)
        self.memory[origin : origin + len(program)] = bytes(program)

    def read(self, addr):
        return self.memory[addr]


def make_cpu(program):
    cycles = []
    cpu = CPU(FakeBus(program), on_cycles=cycles.append)
    return cpu, cycles


def test_starts_at_0x100():
    cpu, _ = make_cpu([])
    assert cpu.registers.pc == 0x100


def test_nop_advances_pc():
    cpu, cycles = make_cpu([0x00])
    assert cpu.step() is True
    assert cpu.registers.pc == 0x101
    assert cpu.cur_opcode == 0x00
    assert cpu.cur_inst.type == InstructionType.NOP
    assert cycles == []


def test_ld_c_d8_fetches_immediate():
    cpu, cycles = make_cpu([0x0E, 0x42])
    cpu.step()
    assert cpu.fetched_data == 0x42
    assert cpu.registers.pc == 0x102
    assert cycles == [1]


def test_jp_d16_fetches_little_endian_word():
    cpu, cycles = make_cpu([0xC3, 0x34, 0x12])
    cpu.step()
    assert cpu.fetched_data == 0x1234
    assert cpu.registers.pc == 0x103
    assert cycles == [1, 1]


def test_xor_a_fetches_register():
    cpu, _ = make_cpu([0xAF])
    cpu.registers.a = 0x5A
    cpu.step()
    assert cpu.fetched_data == 0x5A
    assert cpu.registers.pc == 0x101


def test_dec_b_fetches_register():
    cpu, _ = make_cpu([0x05])
    cpu.registers.b = 0x07
    cpu.step()
    assert cpu.fetched_data == 0x07
    assert cpu.dest_is_mem is False
    assert cpu.mem_dest == 0


def test_sequence_of_instructions():
    cpu, cycles = make_cpu([0x00, 0x0E, 0x42, 0xC3, 0x50, 0x01])
    for _ in range(3):
        cpu.step()
    assert cpu.registers.pc == 0x106
    assert len(cycles) == 3


def test_unknown_opcode_raises():
    cpu, _ = make_cpu([0x01])
    with pytest.raises(UnknownInstructionError) as info:
        cpu.step()
    assert info.value.opcode == 0x01


def test_halted_cpu_does_not_fetch():
    cpu, _ = make_cpu([0x01])
    cpu.halted = True
    assert cpu.step() is True
    assert cpu.registers.pc == 0x100


@pytest.mark.parametrize(
    "reg, high, low",
    [
        (RegisterType.AF, "a", "f"),
        (RegisterType.BC, "b", "c"),
        (RegisterType.DE, "d", "e"),
        (RegisterType.HL, "h", "l"),
    ],
)
def test_register_pairs(reg, high, low):
    regs = Registers()
    setattr(regs, high, 0x12)
    setattr(regs, low, 0x34)
    assert regs.read(reg) == 0x1234


@pytest.mark.parametrize("reg, name", [(RegisterType.A, "a"), (RegisterType.L, "l"),
                                       (RegisterType.SP, "sp"), (RegisterType.PC, "pc")])
def test_single_registers(reg, name):
    cpu, _ = make_cpu([])
    setattr(cpu.registers, name, 0x77)
    assert cpu.read_reg(reg) == 0x77


def test_none_register_reads_zero():
    cpu, _ = make_cpu([])
    cpu.registers.a = 0xFF
    assert cpu.read_reg(RegisterType.NONE) == 0
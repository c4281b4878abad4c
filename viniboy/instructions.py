"""Instruction set description and opcode lookup."""

from dataclasses import dataclass
from enum import IntEnum


class InstructionType(IntEnum):
    NONE = 0
    NOP = 1
    LD = 2
    INC = 3
    DEC = 4
    RLCA = 5
    ADD = 6
    RRCA = 7
    STOP = 8
    RLA = 9
    JR = 10
    RRA = 11
    DAA = 12
    CPL = 13
    SCF = 14
    CCF = 15
    HALT = 16
    ADC = 17
    SUB = 18
    SBC = 19
    AND = 20
    XOR = 21
    OR = 22
    CP = 23
    POP = 24
    JP = 25
    PUSH = 26
    RET = 27
    CB = 28
    CALL = 29
    RETI = 30
    LDH = 31
    JPHL = 32
    DI = 33
    EI = 34
    RST = 35
    ERR = 36
    # CB-prefixed instructions
    RLC = 37
    RRC = 38
    RL = 39
    RR = 40
    SLA = 41
    SRA = 42
    SWAP = 43
    SRL = 44
    BIT = 45
    RES = 46
    SET = 47


class AddressMode(IntEnum):
    IMP = 0
    R_D16 = 1
    R_R = 2
    MR_R = 3
    R = 4
    R_D8 = 5
    R_MR = 6
    R_HLI = 7
    R_HLD = 8
    HLI_R = 9
    HLD_R = 10
    R_A8 = 11
    A8_R = 12
    HL_SPR = 13
    D16 = 14
    D8 = 15
    D16_R = 16
    MR_D8 = 17
    MR = 18
    A16_R = 19
    R_A16 = 20


class RegisterType(IntEnum):
    NONE = 0
    A = 1
    F = 2
    B = 3
    C = 4
    D = 5
    E = 6
    H = 7
    L = 8
    AF = 9
    BC = 10
    DE = 11
    HL = 12
    SP = 13
    PC = 14


class ConditionType(IntEnum):
    NONE = 0
    NZ = 1
    Z = 2
    NC = 3
    C = 4


@dataclass(frozen=True)
class Instruction:
    """One decoded instruction: what it does and where its operands come from."""

    type: InstructionType
    mode: AddressMode = AddressMode.IMP
    reg_1: RegisterType = RegisterType.NONE
    reg_2: RegisterType = RegisterType.NONE
    cond: ConditionType = ConditionType.NONE
    param: int = 0


_INSTRUCTIONS = {
    0x00: Instruction(InstructionType.NOP, AddressMode.IMP),
    0x05: Instruction(InstructionType.DEC, AddressMode.R, RegisterType.B),
    0x0E: Instruction(InstructionType.LD, AddressMode.R_D8, RegisterType.C),
    0xAF: Instruction(InstructionType.XOR, AddressMode.R, RegisterType.A),
    0xC3: Instruction(InstructionType.JP, AddressMode.D16),
}


def instruction_by_opcode(opcode):
    """Return the instruction for ``opcode``, or None if the opcode is not known."""
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"opcode out of range: {opcode!r}")
    return _INSTRUCTIONS.get(opcode)
import pytest

from viniboy.cart import Cartridge
from viniboy.common import NotYetImplementedError
from viniboy.cpu import UnknownInstructionError
from viniboy.emu import Emulator, main


def make_rom(program):
    rom = bytearray(0x8000)
    rom[0x100 : 0x100 + len(program)] = bytes(program)
    return rom


def make_emulator(program):
    return Emulator(Cartridge.from_bytes(make_rom(program)))


def test_run_stops_after_max_steps():
    emu = make_emulator([0x00, 0x00, 0x00, 0x00])
    assert emu.run(max_steps=3) == 3
    assert emu.ticks == 3
    assert emu.cpu.registers.pc == 0x103
    assert emu.running is False


def test_cycles_are_counted():
    emu = make_emulator([0x0E, 0x42, 0xC3, 0x00, 0x02])
    emu.run(max_steps=2)
    assert emu.cycle_count == 3


def test_cycles_accumulate_directly():
    emu = make_emulator([])
    emu.cycles(4)
    emu.cycles(2)
    assert emu.cycle_count == 6


def test_unknown_instruction_stops_run():
    emu = make_emulator([0x00, 0x00, 0x01])
    with pytest.raises(UnknownInstructionError):
        emu.run()
    assert emu.ticks == 2
    assert emu.running is False


def test_running_past_rom_reaches_unmapped_memory():
    rom = make_rom([])
    rom[0x7FFF] = 0x00
    emu = Emulator(Cartridge.from_bytes(rom))
    emu.cpu.registers.pc = 0x7FFE
    with pytest.raises(NotYetImplementedError):
        emu.run()
    assert emu.ticks == 2


def test_main_without_arguments(capsys):
    assert main([]) == -1
    assert "Usage" in capsys.readouterr().out


def test_main_with_missing_rom(tmp_path, capsys):
    missing = tmp_path / "missing.gb"
    assert main([str(missing)]) == -2
    assert f"Failed to load ROM file: {missing}" in capsys.readouterr().out


def test_main_reports_emulation_error(tmp_path, capsys):
    path = tmp_path / "bad.gb"
    path.write_bytes(bytes(make_rom([0x01])))
    assert main([str(path)]) == 1
    assert "Unknown Instruction: 01" in capsys.readouterr().err
"""Game cartridge images and their ROM header."""

import logging
import struct
from dataclasses import dataclass
from pathlib import Path

from .common import EmulatorError, NotYetImplementedError

log = logging.getLogger(__name__)

_HEADER_OFFSET = 0x100
_HEADER = struct.Struct("<4s48s16sHBBBBBBBBH")
_CHECKSUM_START = 0x134
_CHECKSUM_END = 0x14C

ROM_TYPES = (
    "ROM ONLY",
    "MBC1",
    "MBC1+RAM",
    "MBC1+RAM+BATTERY",
    "0x04 ???",
    "MBC2",
    "MBC2+BATTERY",
    "0x07 ???",
    "ROM+RAM 1",
    "ROM+RAM+BATTERY 1",
    "0x0A ???",
    "MMM01",
    "MMM01+RAM",
    "MMM01+RAM+BATTERY",
    "0x0E ???",
    "MBC3+TIMER+BATTERY",
    "MBC3+TIMER+RAM+BATTERY 2",
    "MBC3",
    "MBC3+RAM 2",
    "MBC3+RAM+BATTERY 2",
    "0x14 ???",
    "0x15 ???",
    "0x16 ???",
    "0x17 ???",
    "0x18 ???",
    "MBC5",
    "MBC5+RAM",
    "MBC5+RAM+BATTERY",
    "MBC5+RUMBLE",
    "MBC5+RUMBLE+RAM",
    "MBC5+RUMBLE+RAM+BATTERY",
    "0x1F ???",
    "MBC6",
    "0x21 ???",
    "MBC7+SENSOR+RUMBLE+RAM+BATTERY",
)

LICENSE_CODES = {
    0x00: "None",
    0x01: "Nintendo R&D1",
    0x08: "Capcom",
    0x13: "Electronic Arts",
    0x18: "Hudson Soft",
    0x19: "b-ai",
    0x20: "kss",
    0x22: "pow",
    0x24: "PCM Complete",
    0x25: "san-x",
    0x28: "Kemco Japan",
    0x29: "seta",
    0x30: "Viacom",
    0x31: "Nintendo",
    0x32: "Bandai",
    0x33: "Ocean/Acclaim",
    0x34: "Konami",
    0x35: "Hector",
    0x37: "Taito",
    0x38: "Hudson",
    0x39: "Banpresto",
    0x41: "Ubi Soft",
    0x42: "Atlus",
    0x44: "Malibu",
    0x46: "angel",
    0x47: "Bullet-Proof",
    0x49: "irem",
    0x50: "Absolute",
    0x51: "Acclaim",
    0x52: "Activision",
    0x53: "American sammy",
    0x54: "Konami",
    0x55: "Hi tech entertainment",
    0x56: "LJN",
    0x57: "Matchbox",
    0x58: "Mattel",
    0x59: "Milton Bradley",
    0x60: "Titus",
    0x61: "Virgin",
    0x64: "LucasArts",
    0x67: "Ocean",
    0x70: "Infogrames",
    0x71: "Interplay",
    0x72: "Broderbund",
    0x73: "sculptured",
    0x75: "sci",
    0x78: "THQ",
    0x79: "Accolade",
    0x80: "misawa",
    0x83: "lozc",
    0x86: "Tokuma Shoten Intermedia",
    0x87: "Tsukuda Original",
    0x91: "Chunsoft",
    0x92: "Video system",
    0x93: "Ocean/Acclaim",
    0x95: "Varie",
    0x96: "Yonezawa/s'pal",
    0x97: "Kaneko",
    0x99: "Pack in soft",
    0xA4: "Konami (Yu-Gi-Oh!)",
}


class CartridgeError(EmulatorError):
    """Raised when a cartridge cannot be loaded or accessed."""


@dataclass(frozen=True)
class RomHeader:
    """The cartridge header found at 0x0100..0x014F of the ROM."""

    entry: bytes
    nintendo_logo: bytes
    title: str
    new_lic_code: int
    sgb_flag: int
    cartridge_type: int
    rom_size: int
    ram_size: int
    dest_code: int
    lic_code: int
    version: int
    checksum: int
    global_checksum: int

    @classmethod
    def from_bytes(cls, data):
        """Parse a header from the bytes starting at ROM offset 0x0100."""
        if len(data) < _HEADER.size:
            raise CartridgeError(
                f"header needs {_HEADER.size} bytes, got {len(data)}"
            )
        (
            entry,
            logo,
            raw_title,
            new_lic_code,
            sgb_flag,
            cartridge_type,
            rom_size,
            ram_size,
            dest_code,
            lic_code,
            version,
            checksum,
            global_checksum,
        ) = _HEADER.unpack_from(data, 0)
        # The title is stored NUL-terminated in at most 15 characters.
        title = raw_title[:15].split(b"\0", 1)[0].decode("latin-1")
        return cls(
            entry=entry,
            nintendo_logo=logo,
            title=title,
            new_lic_code=new_lic_code,
            sgb_flag=sgb_flag,
            cartridge_type=cartridge_type,
            rom_size=rom_size,
            ram_size=ram_size,
            dest_code=dest_code,
            lic_code=lic_code,
            version=version,
            checksum=checksum,
            global_checksum=global_checksum,
        )


@dataclass(frozen=True)
class Cartridge:
    """A loaded ROM image together with its parsed header."""

    filename: str
    rom_data: bytes
    header: RomHeader

    @classmethod
    def from_bytes(cls, data, filename=""):
        """Build a cartridge from a ROM image held in memory."""
        data = bytes(data)
        end = _HEADER_OFFSET + _HEADER.size
        if len(data) < end:
            raise CartridgeError(
                f"ROM image too small: {len(data)} bytes, need at least {end}"
            )
        header = RomHeader.from_bytes(data[_HEADER_OFFSET:end])
        cart = cls(filename=filename, rom_data=data, header=header)
        cart._log_summary()
        return cart

    @classmethod
    def load(cls, path):
        """Read a ROM image from ``path``."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise CartridgeError(f"Failed to open: {path}") from exc
        log.debug("Opened: %s", path)
        return cls.from_bytes(data, str(path))

    def type_name(self):
        """Name of the cartridge hardware type, or "UNKNOWN"."""
        kind = self.header.cartridge_type
        if kind < len(ROM_TYPES):
            return ROM_TYPES[kind]
        return "UNKNOWN"

    def license_name(self):
        """Name of the licensee, or "UNKNOWN"."""
        return LICENSE_CODES.get(self.header.lic_code, "UNKNOWN")

    def checksum_ok(self):
        """Tell whether the header checksum matches the header bytes."""
        x = 0
        for byte in self.rom_data[_CHECKSUM_START : _CHECKSUM_END + 1]:
            x = (x - byte - 1) & 0xFF
        return x == self.header.checksum

    def read(self, addr):
        """Read one byte of ROM."""
        if not 0 <= addr < len(self.rom_data):
            raise CartridgeError(f"ROM read out of range: {addr:#06x}")
        return self.rom_data[addr]

    def write(self, addr, value):
        """Write to the cartridge.

        Memory bank controllers are not emulated, so every write is
        rejected with :class:`NotYetImplementedError` naming the cartridge
        type, the address and the value that was refused.
        """
        message = (
            f"NOT YET IMPLEMENTED: write of {value & 0xFF:#04x} "
            f"to {addr:#06x} on a {self.type_name()} cartridge"
        )
        log.debug(message)
        raise NotYetImplementedError(message)

    def _log_summary(self):
        header = self.header
        log.debug("CARTRIDGE LOADED:")
        log.debug("\t Title    : %s", header.title)
        log.debug("\t Type     : %02X (%s)", header.cartridge_type, self.type_name())
        log.debug("\t ROM Size : %d KB", 32 << header.rom_size)
        log.debug("\t RAM Size : %02X", header.ram_size)
        log.debug("\t LIC Code : %02X (%s)", header.lic_code, self.license_name())
        log.debug("\t ROM Vers : %02X", header.version)
        log.debug(
            "\t Checksum : %02X (%s)",
            header.checksum,
            "PASSED" if self.checksum_ok() else "FAILED",
        )
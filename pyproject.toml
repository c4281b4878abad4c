[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "viniboy"
version = "0.1.0"
description = "An early-stage Game Boy emulator core: cartridge header decoding, ROM address bus and CPU fetch/decode loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "sm83", "rom", "cartridge"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
viniboy = "viniboy.emu:main"

[tool.hatch.build.targets.wheel]
packages = ["viniboy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

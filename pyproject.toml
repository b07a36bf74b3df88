[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pearlos"
version = "1.5.0"
description = "A small hobby operating system modelled in Python: text display, keyboard decoding, kernel memory, an in-memory file system and a command shell."
requires-python = ">=3.10"
dependencies = []
keywords = ["operating-system", "kernel", "shell", "text-mode", "filesystem", "scancodes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pearlos = "pearlos.kernel:main"

[tool.hatch.build.targets.wheel]
packages = ["pearlos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

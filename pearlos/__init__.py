"""A small hobby operating system modelled in Python: display, keyboard, memory, file system and shell."""

__version__ = "1.5.0"
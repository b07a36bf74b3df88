# pearlos

A small hobby operating system modelled in Python. It has an 80×25
text-mode display held in memory, a PC keyboard scancode decoder, a
kernel memory allocator, an in-memory file system and the `ksh`
command shell.

## Installing

```
pip install .
```

## Running

```
printf 'help\nls\ncat\nreadme\n' | pearlos
```

`pearlos` boots the system and feeds the shell the characters it reads
from standard input, one at a time. Each line is one command; commands
that ask for more input (`echo`, `calc`, `mk`, `cat`, `to` and so on)
read it from the following lines. The shell stops at end of input, or
after `exit` answered with `y`. Then the final contents of the display
are printed, with trailing blank rows left out, and the command returns
0. If the kernel panics (for instance through the `panic` command), it
prints `[PANIC]` and the message instead and returns 1.

Commands (type `help` for the full list):

- `echo`, `kowsay`, `fortune`, `random`, `calc`, `version`
- `ls`, `mk`, `rm`, `cat`, `to` to work with files
- `memstat`, `memalloc`, `pearlfetch`
- `theme-light`, `theme-dark`, `theme-pascal`, `theme-hacker`
- `wipe` to clear the screen, `panic` to stop the kernel, `exit` to leave

Lines starting with `;` are comments. A fresh boot creates four files:
`os-release`, `license`, `readme` and `roadmap`.

## Using it as a library

```python
from pearlos.fs import FileSystem, mkfs
from pearlos.printf import format_string

fs = FileSystem()
mkfs(fs)
print(fs.names())            # ['os-release', 'license', 'readme', 'roadmap']

fs.make("notes")
fs.write("notes", b"hello\n")
print(fs.read("notes")[:6])  # b'hello\n'

print(format_string("%05d|%-4s|%X", 42, "ab", 255))  # 00042|ab  |FF
```

The modules:

- `pearlos.display`: `Display` holds video memory, the cursor, scrolling
  and the colour theme; `Color` names the sixteen colours and
  `attribute()` combines a foreground and a background.
- `pearlos.keyboard`: `Keyboard.feed()` turns scan codes into
  characters, tracking shift, control, alt codes and the lock keys;
  `led_state()` gives the LED byte.
- `pearlos.console`: `Console` prints (`write`, `writeln`, `printf`),
  reads lines (`scan`) and reports `info`, `warning`, `error` and
  `panic` messages; `panic` raises `pearlos.errors.KernelPanic`.
- `pearlos.memory`: `KernelMemory` with `kmalloc`, `kfree`, `usage`,
  `usage_effective` and `total`.
- `pearlos.fs`: `FileSystem` with `make`, `remove`, `exists`, `names`,
  `size`, `read`, `write` and `clean`; failures raise `FileNotFound`,
  `FileAlreadyExists` or `TooManyFiles`. `file_name_valid()` checks a
  name's characters and `mkfs()` creates the standard files.
- `pearlos.printf`: `format_string()` with `%s %d %u %x %X %c %%`,
  widths, `-` and `0` padding.
- `pearlos.conv`: number and character conversions such as
  `str_to_int`, `hex_to_int`, `int_to_str` and `uint32_to_hex`.
- `pearlos.rand`: `Random` and the `rand_lcg` step.
- `pearlos.smbios`: finds an SMBIOS entry point in a memory image and
  reads the BIOS name and version strings.
- `pearlos.shell`: `Shell.interpret()` runs one command and returns a
  `ShellStatus`; `Shell.run()` is the prompt loop.
- `pearlos.kernel`: `boot()` wires everything together and runs the
  shell; `main()` is the `pearlos` command.

## What it does not do

- The display is not drawn live: while the shell runs, nothing appears on
  the terminal. `pearlos` prints the screen once, when the shell ends.
- `boot()` reads characters directly; it does not go through
  `Keyboard`, and there is no interrupt handling or hardware access.
- `boot()` does not read SMBIOS data, so `pearlfetch` reports the BIOS
  name and version as `Unknown`.
- Each file holds one sector (1020 bytes); data written past that is
  dropped, and files exist only for the life of the process.

## Tests

```
pip install .[test]
pytest
```
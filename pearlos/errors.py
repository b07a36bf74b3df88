"""Kernel messages and the exception raised on a kernel panic."""

KERNEL_INFO_ENTERED = "Booting..."
KERNEL_INFO_INIT_START = "Initializing..."
KERNEL_INFO_INIT_DONE = "Done!"
KERNEL_INFO_WELCOME = "Welcome to pearlOS!"
KERNEL_INFO_SHELL_WELCOME = (
    "                                         /$$  /$$$$$$   /$$$$$$ \n"
    "                                        | $$ /$$__  $$ /$$__  $$\n"
    "  /$$$$$$   /$$$$$$   /$$$$$$   /$$$$$$ | $$| $$  \\ $$| $$  \\__/\n"
    " /$$__  $$ /$$__  $$ |____  $$ /$$__  $$| $$| $$  | $$|  $$$$$$ \n"
    "| $$  \\ $$| $$$$$$$$  /$$$$$$$| $$  \\__/| $$| $$  | $$ \\____  $$\n"
    "| $$  | $$| $$_____/ /$$__  $$| $$      | $$| $$  | $$ /$$  \\ $$\n"
    "| $$$$$$$/|  $$$$$$$|  $$$$$$$| $$      | $$|  $$$$$$/|  $$$$$$/\n"
    "| $$____/  \\_______/ \\_______/|__/      |__/ \\______/  \\______/ \n"
    "| $$                                                            \n"
    "| $$                                                            \n"
    "|__/                                                            \n"
)
KERNEL_INFO_MANUAL_HELP = 'Type "help" to open ksh manual.\n'
KERNEL_INFO_SHELL_UNKNOWN_COMMAND = "Invalid command!\n"
KERNEL_PANIC_MEMORY_INDEX_FULL = (
    "Kernel index is full!\nCAUSE: Too many kmalloc() calls...\n"
)
KERNEL_PANIC_MEMORY_FULL = (
    "Kernel memory is full!\nCAUSE: The system ran out of RAM..."
)
FIRMWARE_ERROR_ISR_EXCEPTION = "(ERROR) Recieved ISR exception: "
FIRMWARE_ERROR_SMBIOS_ENTRY_MISSING = (
    "(ERROR) Recieved exception: Couldn't find an SMBIOS entry...\n"
)


class KernelPanic(Exception):
    """A fatal kernel condition; the system cannot continue."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
"""How table and value log files are loaded."""

from enum import IntEnum


class FileLoadingMode(IntEnum):
    """Loading mode for LSM table files and value log files."""

    FILE_IO = 0
    """Files are read with standard I/O."""
    LOAD_TO_RAM = 1
    """Files are loaded into RAM."""
    MEMORY_MAP = 2
    """Files are memory-mapped."""
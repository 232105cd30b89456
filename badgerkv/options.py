"""Parameters used to open a database."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .loading_mode import FileLoadingMode
from .logger import Logger, default_logger

Transform = Callable[[bytes], bytes]


@dataclass
class Options:
    """Settings of a database; start from :func:`default_options`.

    The bare constructor yields zero values and no logger; use
    :meth:`evolve` to derive a changed copy.
    """

    # Required options.
    dir: str = ""
    value_dir: str = ""

    # Usually modified options.
    sync_writes: bool = False
    table_loading_mode: FileLoadingMode = FileLoadingMode.FILE_IO
    value_log_loading_mode: FileLoadingMode = FileLoadingMode.FILE_IO
    num_versions_to_keep: int = 0
    read_only: bool = False
    truncate: bool = False
    logger: Optional[Logger] = None

    # Fine tuning options.
    max_table_size: int = 0
    level_size_multiplier: int = 0
    max_levels: int = 0
    value_threshold: int = 0
    num_memtables: int = 0

    num_level_zero_tables: int = 0
    num_level_zero_tables_stall: int = 0

    level_one_size: int = 0
    value_log_file_size: int = 0
    value_log_max_entries: int = 0

    num_compactors: int = 0
    compact_l0_on_close: bool = False
    log_rotates_to_flush: int = 0

    backup_key_fn: Optional[Transform] = None
    backup_value_fn: Optional[Transform] = None
    restore_key_fn: Optional[Transform] = None
    restore_value_fn: Optional[Transform] = None

    # Transaction timestamps are managed by the caller.
    managed_txns: bool = False

    # Limits used by tests to force small batches.
    max_batch_count: int = 0
    max_batch_size: int = 0

    def evolve(self, **kwargs: Any) -> Options:
        """Return a copy with the given fields replaced; this object is unchanged."""
        return dataclasses.replace(self, **kwargs)

    def errorf(self, fmt: str, *args: Any) -> None:
        """Log an error message, if a logger is configured."""
        if self.logger is not None:
            self.logger.errorf(fmt, *args)

    def warningf(self, fmt: str, *args: Any) -> None:
        """Log a warning message, if a logger is configured."""
        if self.logger is not None:
            self.logger.warningf(fmt, *args)

    def infof(self, fmt: str, *args: Any) -> None:
        """Log an informational message, if a logger is configured."""
        if self.logger is not None:
            self.logger.infof(fmt, *args)

    def debugf(self, fmt: str, *args: Any) -> None:
        """Log a debug message, if a logger is configured."""
        if self.logger is not None:
            self.logger.debugf(fmt, *args)


def default_options(path: str) -> Options:
    """Recommended options for good performance, storing data under ``path``."""
    return Options(
        dir=path,
        value_dir=path,
        level_one_size=256 << 20,
        level_size_multiplier=10,
        table_loading_mode=FileLoadingMode.MEMORY_MAP,
        value_log_loading_mode=FileLoadingMode.MEMORY_MAP,
        max_levels=7,
        max_table_size=64 << 20,
        num_compactors=2,
        num_level_zero_tables=5,
        num_level_zero_tables_stall=10,
        num_memtables=5,
        sync_writes=True,
        num_versions_to_keep=1,
        compact_l0_on_close=True,
        # One less than 1 GiB so twice the size still fits in a signed 32-bit int.
        value_log_file_size=(1 << 30) - 1,
        value_log_max_entries=1_000_000,
        value_threshold=32,
        truncate=False,
        logger=default_logger,
        log_rotates_to_flush=2,
    )


def lsm_only_options(path: str) -> Options:
    """Default options with values up to 65500 bytes kept in the LSM tree."""
    return default_options(path).evolve(value_threshold=65500)
"""Options, loggers, loading modes, iteration checks and size histograms for an LSM-tree store."""

__version__ = "0.1.0"
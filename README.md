# badgerkv

Pure-Python building blocks of an embeddable LSM-tree key-value store.
There are no third-party dependencies.

## Modules

- `badgerkv.options`: the `Options` dataclass, which holds a store's
  settings.
  - `default_options(path)` gives the recommended settings. Both `dir` and
    `value_dir` are set to `path`.
  - `lsm_only_options(path)` gives the same settings with
    `value_threshold=65500`.
  - `Options.evolve(**kwargs)` returns a changed copy and leaves the original as it was.
  - `Options.errorf`, `warningf`, `infof` and `debugf` forward to the configured
    `logger`. They do nothing when `logger` is `None`.
- `badgerkv.logger`: loggers for diagnostic messages.
  - `Logger` writes lines such as `ERROR: ...`, `WARNING: ...`, `INFO: ...` and
    `DEBUG: ...` to a text stream, which is stderr by default. Messages are
    formatted with printf-style verbs, including `%v` and `%q`.
  - `DefaultLogger` also puts `badger ` and the local date and time before
    each line.
  - `default_logger` is a ready-made `DefaultLogger` instance.
- `badgerkv.loading_mode`: the `FileLoadingMode` enum, with the values
  `FILE_IO`, `LOAD_TO_RAM` and `MEMORY_MAP`.
- `badgerkv.iteration`: helpers that decide what an iterator sees.
  - `IteratorOptions` is a frozen dataclass. Its `pick_table(table)` method
    tells whether a table's key range could hold keys with the given `prefix`.
    When `prefix_is_key` is set, it also consults the table's
    `does_not_have`.
  - `TableRange` is a simple table description: a key range plus an optional
    set of keys it is known to hold.
  - `DEFAULT_ITERATOR_OPTIONS` holds the default iterator settings.
  - `is_deleted_or_expired(meta, expires_at, now=None)` checks the `BIT_DELETE`
    meta bit and a Unix-seconds expiry, where 0 means the entry never expires.
- `badgerkv.histogram`: histograms of key and value sizes.
  - Sizes are counted in power-of-two bins made by
    `create_histogram_bins(min_exponent, max_exponent)`.
  - `HistogramData` and `SizeHistogram` record the counts.
  - `build_histogram(items)` takes `(key, value)` pairs. Each part of a pair
    may be a size in bytes or the bytes themselves.
  - `format()` renders the result as text.

## Installation

```
pip install .
```

## Example

```python
from badgerkv.options import default_options
from badgerkv.iteration import IteratorOptions, TableRange
from badgerkv.histogram import build_histogram

opts = default_options("/tmp/db").evolve(sync_writes=False)
opts.infof("opening %s", opts.dir)

picker = IteratorOptions(prefix=b"abc")
picker.pick_table(TableRange(b"ab", b"ad"))   # True
picker.pick_table(TableRange(b"abd", b"ae"))  # False

hist = build_histogram([(b"A", b"B"), (b"AA", b"BB"), (b"AAA", b"BBB")])
hist.key_size_histogram.count_per_bin[:2]     # [1, 2]
print(hist.format())
```

## What this package does not do

This package contains settings, logging, iteration checks and size
statistics only. It has no storage engine:

- no database to open, and no transactions or iterators over stored data;
- no on-disk table or value log files;
- no MANIFEST log;
- no locking of a database directory.

There is no command-line tool.

## Tests

```
pip install .[test]
pytest
```
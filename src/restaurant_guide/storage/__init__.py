"""CSV-backed persistence primitives."""

from restaurant_guide.storage.csv_files import (
    append_row,
    read_rows,
    rewrite_rows,
    split_row,
)
from restaurant_guide.storage.exceptions import StorageError


__all__ = [
    "StorageError",
    "append_row",
    "read_rows",
    "rewrite_rows",
    "split_row",
]

"""Reading and writing the guide's CSV files.

Every file starts with a header row. Fields are comma separated and free
text may be quoted; a comma inside a quoted span is part of the value.

Two write strategies are provided:
- ``rewrite_rows``: full-state rewrite through a temporary file that is
  renamed over the target, so an interrupted write never leaves a
  truncated file behind.
- ``append_row``: additive write used by the restaurant catalog.
"""

from __future__ import annotations

import csv
import io
import os
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from restaurant_guide.observability.logging import get_logger
from restaurant_guide.storage.exceptions import StorageError


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = get_logger(__name__)

# utf-8-sig tolerates the BOM spreadsheet exports tend to add
_READ_ENCODING = "utf-8-sig"
_WRITE_ENCODING = "utf-8"


def split_row(line: str) -> list[str]:
    """Split one CSV line into fields, honouring quoted spans.

    Args:
        line: A single line without its terminator.

    Returns:
        The field values with surrounding quotes removed.
    """
    return next(csv.reader(io.StringIO(line)), [])


def read_rows(path: Path) -> list[list[str]]:
    """Read every data row of a CSV file, skipping the header.

    A missing file is an empty table, not an error.

    Args:
        path: File to read.

    Returns:
        Rows as lists of field values. Blank lines are dropped.
    """
    if not path.exists():
        logger.debug("Backing file not found, starting empty", path=str(path))
        return []

    with path.open(encoding=_READ_ENCODING, newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        return [row for row in reader if any(field.strip() for field in row)]


def _default_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _match_mode(path: Path, tmp_name: str) -> None:
    # Temporary files are created 0600; keep the mode a plain write would give.
    if path.exists():
        shutil.copymode(path, tmp_name)
    else:
        os.chmod(tmp_name, _default_mode())


def rewrite_rows(
    path: Path,
    header: Sequence[str],
    rows: Iterable[Sequence[object]],
) -> None:
    """Replace the content of ``path`` with ``header`` and ``rows``.

    The data is written to a sibling temporary file first and then moved
    over the target with ``os.replace``. An existing file keeps its
    permission bits; a new one gets the mode the process umask allows.

    Raises:
        StorageError: If the directory or file cannot be written.
    """
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=_WRITE_ENCODING,
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            writer = csv.writer(tmp, lineterminator="\n")
            writer.writerow(header)
            writer.writerows(rows)
            tmp.flush()
            os.fsync(tmp.fileno())
        _match_mode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        logger.error("Failed to rewrite backing file", path=str(path), error=str(e))
        msg = f"Could not save {path.name}: {e.strerror or e}"
        raise StorageError(msg, path=path) from e


def _ends_with_newline(path: Path) -> bool:
    with path.open("rb") as f:
        f.seek(-1, os.SEEK_END)
        return f.read(1) == b"\n"


def append_row(path: Path, header: Sequence[str], row: Sequence[object]) -> None:
    """Append one row to ``path``, writing ``header`` first for a new file.

    Raises:
        StorageError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        needs_header = not path.exists() or path.stat().st_size == 0
        with path.open("a", encoding=_WRITE_ENCODING, newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            if needs_header:
                writer.writerow(header)
            elif not _ends_with_newline(path):
                f.write("\n")
            writer.writerow(row)
    except OSError as e:
        logger.error("Failed to append to backing file", path=str(path), error=str(e))
        msg = f"Could not save {path.name}: {e.strerror or e}"
        raise StorageError(msg, path=path) from e

import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from narrato.logging.logger import Log
from narrato.segmentation.models import Document


@contextmanager
def scoped_upload(
    upload_bytes: bytes,
    suffix: str = "",
    tmp_dir: str | None = None,
) -> Generator[Path, None, None]:
    """Write an upload to a temporary file and delete it on every exit path.

    Deletion errors are logged and never raised.
    """
    fd, name = tempfile.mkstemp(prefix="narrato-", suffix=suffix, dir=tmp_dir)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(upload_bytes)
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            Log.error(f"Error deleting uploaded file {path}: {exc}")


def load_document(path: Path, fmt: str) -> Document:
    """Read a stored upload into a Document.

    Raises:
        FileNotFoundError: if the file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return Document(raw_bytes=path.read_bytes(), format=fmt)

"""Blob storage for uploaded files."""

import logging
import re
import time
from pathlib import Path, PurePosixPath

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "uploads"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.\-]+")


def sanitize_filename(original_name: str | None) -> str:
    """Reduce a client-supplied filename to a safe single path component."""
    name = (original_name or "").replace("\\", "/").rsplit("/", 1)[-1]
    clean = _UNSAFE_CHARS.sub("_", name)
    return clean or "file"


class BlobStore:
    """Stores uploaded files under ``root/<subdir>/`` with generated names.

    Stored files are addressed by their public relative path,
    ``uploads/<subdir>/<name>``, which is what the database rows keep and what
    the ``/uploads`` route serves.
    """

    def __init__(self, root: str | Path, subdirs: tuple[str, ...] = ()):
        self.root = Path(root)
        self.subdirs = subdirs

    def ensure_dirs(self) -> None:
        """Create the root and every known subdirectory."""
        self.root.mkdir(parents=True, exist_ok=True)
        for subdir in self.subdirs:
            (self.root / subdir).mkdir(parents=True, exist_ok=True)

    def save(self, subdir: str, original_name: str | None, data: bytes) -> str:
        """Write ``data`` once under a new unique name and return its public path.

        Names are ``<epoch millis>_<sanitized original name>``. The file is
        opened in exclusive-create mode; on collision the prefix is bumped
        until a free name is found.
        """
        directory = self.root / subdir
        directory.mkdir(parents=True, exist_ok=True)
        clean = sanitize_filename(original_name)
        stamp = int(time.time() * 1000)

        while True:
            name = f"{stamp}_{clean}"
            path = directory / name
            try:
                fh = open(path, "xb")
            except FileExistsError:
                stamp += 1
                continue
            break

        try:
            with fh:
                fh.write(data)
        except OSError:
            path.unlink(missing_ok=True)
            raise

        public_path = str(PurePosixPath(PUBLIC_PREFIX, subdir, name))
        logger.info(f"Stored blob {public_path} ({len(data)} bytes)")
        return public_path

    def resolve(self, public_path: str) -> Path:
        """Map a public path back to a file under the store root."""
        parts = PurePosixPath(public_path).parts
        if len(parts) < 2 or parts[0] != PUBLIC_PREFIX or ".." in parts:
            raise ValueError(f"Not a blob path: {public_path!r}")
        return self.root.joinpath(*parts[1:])

    def delete(self, public_path: str) -> bool:
        """Best-effort removal. Returns False instead of raising on failure."""
        try:
            self.resolve(public_path).unlink()
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to delete blob {public_path}: {e}")
            return False
        logger.info(f"Deleted blob {public_path}")
        return True

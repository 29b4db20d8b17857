"""File-backed JSON document store.

The whole catalog lives in one JSON document::

    {"products": [...], "next_id": int,
     "metadata": {"created_at": ..., "last_modified": ..., "version": ...}}

The document is the unit of atomicity. Every write validates the full
structure, serializes it to ``<path>.tmp`` and renames that over the
target, so readers see either the old or the new document and never a
torn one. Writers are serialized through an advisory lock: the sibling
``<path>.lock`` marker exists exactly while some writer holds it.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

import filelock

from catalog.domain.exceptions import (
    CorruptStoreError,
    LockTimeoutError,
    StoragePermissionError,
    StorageNotFoundError,
    StorageWriteError,
)
from catalog.infrastructure.config import StorageSettings

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"
LOCK_POLL_INTERVAL = 0.1

_REQUIRED_KEYS = ("products", "next_id", "metadata")
_REQUIRED_METADATA = ("created_at", "last_modified", "version")
_REQUIRED_PRODUCT_FIELDS = ("id", "title", "price", "created_at")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def default_document() -> dict:
    """An empty catalog: no products, ids starting at 1."""
    now = _now_iso()
    return {
        "products": [],
        "next_id": 1,
        "metadata": {
            "created_at": now,
            "last_modified": now,
            "version": SCHEMA_VERSION,
        },
    }


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _valid_product(record: object) -> bool:
    if not isinstance(record, dict):
        return False
    if any(key not in record for key in _REQUIRED_PRODUCT_FIELDS):
        return False
    if not _is_int(record["id"]) or record["id"] < 1:
        return False
    if not isinstance(record["title"], str) or not record["title"].strip():
        return False
    if not _is_number(record["price"]) or record["price"] < 0:
        return False
    return isinstance(record["created_at"], str)


class JsonDocumentStore:
    """Atomic, lock-protected access to a single JSON document.

    Nothing is cached: ``read()`` goes to disk every time so changes
    made by other processes are always picked up.
    """

    def __init__(
        self, file_path: Path, settings: StorageSettings | None = None
    ) -> None:
        self._file_path = Path(file_path)
        self._settings = settings or StorageSettings()
        self._lock = filelock.SoftFileLock(str(self.lock_path))
        self._local = threading.local()
        self.initialize()

    # --- Paths ----------------------------------------------------------------

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def temp_path(self) -> Path:
        return self._file_path.with_name(self._file_path.name + ".tmp")

    @property
    def lock_path(self) -> Path:
        return self._file_path.with_name(self._file_path.name + ".lock")

    # --- Lifecycle ------------------------------------------------------------

    def initialize(self) -> None:
        """Create the directory and an empty document if the file is missing."""
        if self.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoragePermissionError(
                f"Failed to create directory: {self._file_path.parent}"
            ) from exc
        try:
            # Exclusive create: a concurrent bootstrap must not clobber a file
            # another writer has already filled.
            with self._file_path.open("x", encoding="utf-8") as handle:
                handle.write(self._serialize(default_document()))
        except FileExistsError:
            return
        except OSError as exc:
            raise StoragePermissionError(
                f"Failed to initialize file: {self._file_path}"
            ) from exc
        logger.info("Initialized catalog store at %s", self._file_path)

    def exists(self) -> bool:
        return self._file_path.exists()

    def file_size(self) -> int:
        return self._file_path.stat().st_size if self.exists() else 0

    # --- Read / write ---------------------------------------------------------

    def read(self) -> dict:
        """Load and validate the on-disk document.

        An empty file is treated as a fresh, empty catalog.
        """
        if not self.exists():
            try:
                self.initialize()
            except StoragePermissionError as exc:
                raise StorageNotFoundError(
                    f"File not found: {self._file_path}"
                ) from exc

        try:
            content = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise StorageNotFoundError(f"File not found: {self._file_path}") from exc
        except UnicodeDecodeError as exc:
            raise CorruptStoreError(f"Invalid JSON in file: {exc}") from exc
        except OSError as exc:
            raise StoragePermissionError(
                f"Permission denied reading file: {self._file_path}"
            ) from exc

        if not content.strip():
            return default_document()

        try:
            document = json.loads(content)
        except json.JSONDecodeError as exc:
            raise CorruptStoreError(f"Invalid JSON in file: {exc.msg}") from exc

        if not self.validate_structure(document):
            raise CorruptStoreError(f"Invalid JSON structure in {self._file_path}")
        return document

    def write(self, document: dict) -> None:
        """Validate, stamp ``last_modified`` and atomically replace the file.

        On any failure the existing file is left exactly as it was.
        """
        if not self.validate_structure(document):
            raise CorruptStoreError("Invalid data structure")

        with self.locked():
            payload = copy.deepcopy(document)
            payload["metadata"]["last_modified"] = _now_iso()
            try:
                content = self._serialize(payload)
            except (TypeError, ValueError) as exc:
                raise CorruptStoreError(f"Failed to encode JSON: {exc}") from exc
            self._replace_atomically(content)

        logger.debug(
            "Wrote %d products to %s", len(payload["products"]), self._file_path
        )

    # --- Locking --------------------------------------------------------------

    def lock(self) -> None:
        """Acquire the advisory lock, polling until the timeout elapses.

        Re-entrant: nested calls from the same thread only bump a counter.
        """
        if not self._settings.enable_locking:
            return
        depth = getattr(self._local, "depth", 0)
        if depth == 0:
            try:
                self._lock.acquire(
                    timeout=self._settings.lock_timeout,
                    poll_interval=LOCK_POLL_INTERVAL,
                )
            except filelock.Timeout as exc:
                logger.warning(
                    "Gave up waiting %.1fs for lock %s",
                    self._settings.lock_timeout,
                    self.lock_path,
                )
                raise LockTimeoutError(
                    f"Failed to acquire file lock: {self.lock_path}"
                ) from exc
            except OSError as exc:
                raise StoragePermissionError(
                    f"Cannot open lock file: {self.lock_path}"
                ) from exc
        self._local.depth = depth + 1

    def unlock(self) -> None:
        """Release the lock; the outermost release also removes the lock file."""
        if not self._settings.enable_locking:
            return
        depth = getattr(self._local, "depth", 0)
        if depth == 0:
            return
        if depth > 1:
            self._local.depth = depth - 1
            return
        self._local.depth = 0
        # Releasing a soft lock deletes the marker file.
        self._lock.release(force=True)

    @contextmanager
    def locked(self) -> Iterator[None]:
        self.lock()
        try:
            yield
        finally:
            self.unlock()

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def validate_structure(document: object) -> bool:
        """Check that *document* has the shape of a catalog document."""
        if not isinstance(document, dict):
            return False
        if any(key not in document for key in _REQUIRED_KEYS):
            return False

        products = document["products"]
        next_id = document["next_id"]
        metadata = document["metadata"]

        if not isinstance(products, list):
            return False
        if not _is_int(next_id) or next_id < 1:
            return False
        if not isinstance(metadata, dict):
            return False
        if any(key not in metadata for key in _REQUIRED_METADATA):
            return False
        if not all(_valid_product(record) for record in products):
            return False

        ids = [record["id"] for record in products]
        if len(ids) != len(set(ids)):
            return False
        return all(record_id < next_id for record_id in ids)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _serialize(document: dict) -> str:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    def _replace_atomically(self, content: str) -> None:
        tmp_path = self.temp_path
        try:
            with tmp_path.open("w", encoding="utf-8") as tmp_handle:
                tmp_handle.write(content)
                tmp_handle.flush()
                os.fsync(tmp_handle.fileno())
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp_path)
            raise StorageWriteError(
                f"Failed to write {self._file_path}: {exc}"
            ) from exc

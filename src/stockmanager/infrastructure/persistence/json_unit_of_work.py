"""JSON-file-backed UnitOfWork.

The whole store (products, customer orders, supplier orders) is one JSON
document. Entering the unit of work loads it, repositories work on the
in-memory copy, and ``commit()`` replaces the file in a single
``os.replace`` so a crash never leaves half an operation on disk.

Transactions on the same file are serialised within the process by a
per-path ``threading.RLock`` and across processes by an exclusive
``filelock.FileLock`` on ``<store>.lock``, held from load until commit
or rollback.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from filelock import FileLock, Timeout

from stockmanager.domain.exceptions import StorageError
from stockmanager.domain.repository.unit_of_work import UnitOfWork
from stockmanager.infrastructure.persistence.json_order_repository import (
    JsonCustomerOrderRepository,
    JsonSupplierOrderRepository,
)
from stockmanager.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)

_SECTIONS = ("products", "customer_orders", "supplier_orders")

# seconds to wait for another process to release the store
LOCK_TIMEOUT = 30.0

_file_locks: dict[Path, tuple[threading.RLock, FileLock]] = {}
_file_locks_guard = threading.Lock()


def _locks_for(path: Path) -> tuple[threading.RLock, FileLock]:
    with _file_locks_guard:
        locks = _file_locks.get(path)
        if locks is None:
            process_lock = FileLock(path.with_name(path.name + ".lock"), thread_local=False)
            locks = _file_locks[path] = (threading.RLock(), process_lock)
        return locks


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, file_path: Path, lock_timeout: float = LOCK_TIMEOUT) -> None:
        self._file_path = Path(file_path).resolve()
        self._thread_lock, self._process_lock = _locks_for(self._file_path)
        self._lock_timeout = lock_timeout
        self._document: dict[str, list[dict]] | None = None

    def __enter__(self) -> JsonUnitOfWork:
        self._acquire()
        try:
            self._document = self._load()
        except BaseException:
            self._release()
            raise
        self.products = JsonProductRepository(self._document["products"])
        self.customer_orders = JsonCustomerOrderRepository(self._document["customer_orders"])
        self.supplier_orders = JsonSupplierOrderRepository(self._document["supplier_orders"])
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
        finally:
            self._release()

    def commit(self) -> None:
        if self._document is None:
            return
        self._persist(self._document)
        self._document = None

    def rollback(self) -> None:
        # the working copy is simply dropped; the file was never touched
        self._document = None

    # --- Locking --------------------------------------------------------------

    def _acquire(self) -> None:
        self._thread_lock.acquire()
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._process_lock.acquire(timeout=self._lock_timeout)
        except Timeout as exc:
            self._thread_lock.release()
            raise StorageError(
                f"Store {self._file_path} is locked by another process"
            ) from exc
        except OSError as exc:
            self._thread_lock.release()
            raise StorageError(f"Cannot lock store {self._file_path}: {exc}") from exc
        except BaseException:
            self._thread_lock.release()
            raise

    def _release(self) -> None:
        try:
            self._process_lock.release()
        finally:
            self._thread_lock.release()

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, list[dict]]:
        if not self._file_path.exists():
            return {section: [] for section in _SECTIONS}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read store {self._file_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise StorageError(f"Store {self._file_path} is not a JSON object")
        document = {}
        for section in _SECTIONS:
            records = raw.get(section, [])
            if not isinstance(records, list) or not all(
                isinstance(record, dict) and "id" in record for record in records
            ):
                raise StorageError(
                    f"Store {self._file_path} has a malformed '{section}' section"
                )
            document[section] = list(records)
        return document

    def _persist(self, document: dict[str, list[dict]]) -> None:
        payload = json.dumps(document, indent=2) + "\n"
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write store {self._file_path}: {exc}") from exc
        logger.debug("Store %s written", self._file_path)

"""
In-process document store.

Documents are plain dicts grouped in named collections and addressed by a
unique key. Each stored document carries a ``version`` that ``replace``
checks before writing, so a writer holding a stale copy is rejected instead
of silently overwriting a newer one.

``transaction()`` serializes a read-modify-write block behind the store's
re-entrant lock. Writes made inside the block are recorded in an undo log of
(collection, key, previous document) entries; if the block raises, only
those keys are put back. Stored documents are never mutated in place, so
the previous document can be kept by reference:

    with store.transaction():
        store.replace("carts", email, cart_doc, expected_version=3)
        store.replace("users", user_id, user_doc, expected_version=7)
"""

import copy
import logging
from contextlib import contextmanager
from threading import RLock
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for store failures"""


class DuplicateKeyError(StoreError):
    def __init__(self, collection: str, key: str):
        super().__init__(f"Duplicate key {key!r} in collection {collection!r}")
        self.collection = collection
        self.key = key


class DocumentNotFoundError(StoreError):
    def __init__(self, collection: str, key: str):
        super().__init__(f"No document {key!r} in collection {collection!r}")
        self.collection = collection
        self.key = key


class VersionConflictError(StoreError):
    def __init__(self, collection: str, key: str, expected: int, actual: int):
        super().__init__(
            f"Version conflict on {collection}/{key}: expected {expected}, found {actual}"
        )
        self.collection = collection
        self.key = key
        self.expected = expected
        self.actual = actual


class DocumentStore:
    """Keyed document collections with optimistic versioning"""

    def __init__(self):
        self._collections: dict[str, dict[str, dict]] = {}
        self._lock = RLock()
        self._undo_logs: list[list[tuple[str, str, Optional[dict]]]] = []

    def _collection(self, name: str) -> dict[str, dict]:
        return self._collections.setdefault(name, {})

    def _write(self, collection: str, key: str, document: dict) -> None:
        documents = self._collection(collection)
        if self._undo_logs:
            self._undo_logs[-1].append((collection, key, documents.get(key)))
        documents[key] = document

    def find_one(self, collection: str, key: str) -> Optional[dict]:
        """Get a copy of a document by key"""
        with self._lock:
            document = self._collection(collection).get(key)
            return copy.deepcopy(document) if document is not None else None

    def find(self, collection: str) -> list[dict]:
        """Get copies of every document in a collection, in insertion order"""
        with self._lock:
            return [copy.deepcopy(d) for d in self._collection(collection).values()]

    def insert(self, collection: str, key: str, document: dict) -> dict:
        """Insert a new document; the key must be unused"""
        with self._lock:
            documents = self._collection(collection)
            if key in documents:
                raise DuplicateKeyError(collection, key)
            stored = copy.deepcopy(document)
            stored["version"] = 1
            self._write(collection, key, stored)
            return copy.deepcopy(stored)

    def replace(
        self,
        collection: str,
        key: str,
        document: dict,
        expected_version: Optional[int] = None,
    ) -> dict:
        """
        Replace a whole document.

        Args:
            collection: Collection name
            key: Unique document key
            document: New document body
            expected_version: Version the caller read; None skips the check

        Returns:
            The stored document with its new version
        """
        with self._lock:
            documents = self._collection(collection)
            current = documents.get(key)
            if current is None:
                raise DocumentNotFoundError(collection, key)

            actual = current.get("version", 0)
            if expected_version is not None and expected_version != actual:
                raise VersionConflictError(collection, key, expected_version, actual)

            stored = copy.deepcopy(document)
            stored["version"] = actual + 1
            self._write(collection, key, stored)
            return copy.deepcopy(stored)

    @contextmanager
    def transaction(self) -> Iterator["DocumentStore"]:
        """Run a block atomically: all writes commit, or none do"""
        with self._lock:
            undo_log: list[tuple[str, str, Optional[dict]]] = []
            self._undo_logs.append(undo_log)
            try:
                yield self
            except BaseException:
                self._rollback(undo_log)
                logger.debug(f"Store transaction rolled back {len(undo_log)} write(s)")
                raise
            finally:
                self._undo_logs.pop()

            # A nested block that commits still rolls back with its parent
            if self._undo_logs:
                self._undo_logs[-1].extend(undo_log)

    def _rollback(self, undo_log: list[tuple[str, str, Optional[dict]]]) -> None:
        for collection, key, previous in reversed(undo_log):
            documents = self._collection(collection)
            if previous is None:
                documents.pop(key, None)
            else:
                documents[key] = previous

    def reset(self) -> None:
        """Drop every collection"""
        with self._lock:
            self._collections = {}

"""
Document store port with in-memory and Firebase Firestore backends.

Collections are addressed by slash-separated paths, so a sub-collection of an
event is simply ``events/{event_id}/comments``. Documents come back as plain
dicts with the document id injected under ``"id"``.
"""

from __future__ import annotations

import copy
import logging
import operator
import threading
import uuid
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions

from app.core.config import settings
from app.services.exceptions import InternalError
from app.services.firebase_client import get_firestore_client

logger = logging.getLogger(__name__)

Filter = Tuple[str, str, Any]

_OPERATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


def use_firestore() -> bool:
    return settings.USE_FIREBASE is True


class WriteBatch(ABC):
    """Group of writes committed all-or-nothing"""

    @abstractmethod
    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> "WriteBatch": ...

    @abstractmethod
    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> "WriteBatch": ...

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> "WriteBatch": ...

    @abstractmethod
    def commit(self) -> None: ...


class DocumentStore(ABC):
    """Capabilities the core needs from the persistence substrate"""

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]: ...

    @abstractmethod
    def query(
        self,
        collection: str,
        filters: Iterable[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> List[Dict[str, Any]]: ...

    @abstractmethod
    def add(self, collection: str, data: Dict[str, Any]) -> str: ...

    @abstractmethod
    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None: ...

    @abstractmethod
    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None: ...

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> None: ...

    @abstractmethod
    def count(self, collection: str) -> int: ...

    @abstractmethod
    def batch(self) -> WriteBatch: ...


# -------- In-memory backend --------

class MemoryBatch(WriteBatch):
    def __init__(self, store: "MemoryStore"):
        self._store = store
        self._ops: List[Tuple[str, str, str, Optional[Dict[str, Any]]]] = []

    def set(self, collection, doc_id, data):
        self._ops.append(("set", collection, doc_id, dict(data)))
        return self

    def update(self, collection, doc_id, data):
        self._ops.append(("update", collection, doc_id, dict(data)))
        return self

    def delete(self, collection, doc_id):
        self._ops.append(("delete", collection, doc_id, None))
        return self

    def commit(self) -> None:
        self._store._apply(self._ops)
        self._ops = []


class MemoryStore(DocumentStore):
    """Thread-safe in-memory document store.

    Used when Firebase is disabled and as the fake in tests. Batches are
    applied to a copy of the data which replaces the live data only when
    every operation succeeded.
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _with_id(doc_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        item = copy.deepcopy(data)
        item["id"] = doc_id
        return item

    @staticmethod
    def _write(collections, op: str, collection: str, doc_id: str, data: Optional[Dict[str, Any]]) -> None:
        docs = collections.setdefault(collection, {})
        if op == "set":
            docs[doc_id] = copy.deepcopy(data)
        elif op == "update":
            if doc_id not in docs:
                raise InternalError(f"No document to update: {collection}/{doc_id}")
            docs[doc_id].update(copy.deepcopy(data))
        elif op == "delete":
            docs.pop(doc_id, None)
        else:
            raise ValueError(f"Unknown write operation {op}")

    def _apply(self, ops) -> None:
        with self._lock:
            staged = copy.deepcopy(self._collections)
            for op, collection, doc_id, data in ops:
                self._write(staged, op, collection, doc_id, data)
            self._collections = staged

    def get(self, collection, doc_id):
        with self._lock:
            data = self._collections.get(collection, {}).get(doc_id)
            return self._with_id(doc_id, data) if data is not None else None

    def query(self, collection, filters=(), order_by=None, descending=False):
        filters = list(filters)
        with self._lock:
            docs = [
                self._with_id(doc_id, data)
                for doc_id, data in self._collections.get(collection, {}).items()
            ]

        results = []
        for doc in docs:
            matched = True
            for field, op, value in filters:
                if field not in doc or not _OPERATORS[op](doc[field], value):
                    matched = False
                    break
            if matched:
                results.append(doc)

        if order_by:
            # Firestore drops documents lacking the ordering field
            results = [d for d in results if d.get(order_by) is not None]
            results.sort(key=lambda d: d[order_by], reverse=descending)
        return results

    def add(self, collection, data):
        doc_id = uuid.uuid4().hex[:20]
        self.set(collection, doc_id, data)
        return doc_id

    def set(self, collection, doc_id, data):
        with self._lock:
            self._write(self._collections, "set", collection, doc_id, data)

    def update(self, collection, doc_id, data):
        with self._lock:
            self._write(self._collections, "update", collection, doc_id, data)

    def delete(self, collection, doc_id):
        with self._lock:
            self._write(self._collections, "delete", collection, doc_id, None)

    def count(self, collection):
        with self._lock:
            return len(self._collections.get(collection, {}))

    def batch(self):
        return MemoryBatch(self)


# -------- Firestore backend --------

class FirestoreBatch(WriteBatch):
    def __init__(self, client):
        self._client = client
        self._batch = client.batch()

    def _ref(self, collection, doc_id):
        return self._client.collection(collection).document(doc_id)

    def set(self, collection, doc_id, data):
        self._batch.set(self._ref(collection, doc_id), data)
        return self

    def update(self, collection, doc_id, data):
        self._batch.update(self._ref(collection, doc_id), data)
        return self

    def delete(self, collection, doc_id):
        self._batch.delete(self._ref(collection, doc_id))
        return self

    def commit(self) -> None:
        try:
            self._batch.commit()
        except google_exceptions.GoogleAPIError as exc:
            logger.error(f"Firestore batch commit failed: {exc}")
            raise InternalError(str(exc)) from exc


class FirestoreStore(DocumentStore):
    """Document store backed by a Firestore client"""

    def __init__(self, client=None):
        self._client = client or get_firestore_client()

    @staticmethod
    def _to_dict(doc) -> Dict[str, Any]:
        item = doc.to_dict() or {}
        item["id"] = doc.id
        return item

    def _call(self, fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except google_exceptions.GoogleAPIError as exc:
            logger.error(f"Firestore call failed: {exc}")
            raise InternalError(str(exc)) from exc

    def get(self, collection, doc_id):
        doc = self._call(self._client.collection(collection).document(doc_id).get)
        return self._to_dict(doc) if doc.exists else None

    def query(self, collection, filters=(), order_by=None, descending=False):
        query = self._client.collection(collection)
        for field, op, value in filters:
            query = query.where(field, op, value)
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        docs = self._call(query.get)
        return [self._to_dict(d) for d in docs]

    def add(self, collection, data):
        _, ref = self._call(self._client.collection(collection).add, data)
        return ref.id

    def set(self, collection, doc_id, data):
        self._call(self._client.collection(collection).document(doc_id).set, data)

    def update(self, collection, doc_id, data):
        self._call(self._client.collection(collection).document(doc_id).update, data)

    def delete(self, collection, doc_id):
        self._call(self._client.collection(collection).document(doc_id).delete)

    def count(self, collection):
        results = self._call(self._client.collection(collection).count().get)
        return int(results[0][0].value)

    def batch(self):
        return FirestoreBatch(self._client)


@lru_cache(maxsize=1)
def get_document_store() -> DocumentStore:
    """Return the process-wide store selected by settings"""
    if use_firestore():
        logger.info("Using Firestore document store")
        return FirestoreStore()
    logger.info("Using in-memory document store")
    return MemoryStore()

"""
Library example: an audit trail and a catalogue counter fed by lifecycle events.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Tuple, Type

from doclifecycle import LIFECYCLE_EVENTS, Document

from .models import Book, Writer, book_schema


class AuditTrail:
    """
    Collects every lifecycle event of the watched models.
    """

    def __init__(self) -> None:
        self.entries: List[Dict[str, Any]] = []
        self._subscriptions: List[Tuple[Type[Document], str, Callable[[Document], None]]] = []

    def watch(self, *models: Type[Document]) -> "AuditTrail":
        for model in models:
            for event in LIFECYCLE_EVENTS:
                listener = self._recorder(model.model_name, event.name)
                model.on(event.name, listener)
                self._subscriptions.append((model, event.name, listener))
        return self

    def close(self) -> None:
        for model, event_name, listener in self._subscriptions:
            model.off(event_name, listener)
        self._subscriptions.clear()

    def _recorder(self, model_name: str, event_name: str) -> Callable[[Document], None]:
        def record(document: Document) -> None:
            self.entries.append(
                {
                    "model": model_name,
                    "event": event_name,
                    "id": document.id,
                    "at": datetime.now(timezone.utc).isoformat(),
                }
            )

        return record


class Catalogue:
    """
    Keeps a running count of books by listening on the book schema.
    """

    def __init__(self) -> None:
        self.size = 0
        book_schema.on("afterInsert", self._added)
        book_schema.on("afterRemove", self._removed)

    def close(self) -> None:
        book_schema.off("afterInsert", self._added)
        book_schema.off("afterRemove", self._removed)

    def _added(self, book: Book) -> None:
        self.size += 1

    def _removed(self, book: Book) -> None:
        self.size -= 1


def stamp_timestamps(book: Book) -> None:
    now = datetime.now(timezone.utc).isoformat()
    book["updated_at"] = now
    if "created_at" not in book:
        book["created_at"] = now


def run_demo() -> Dict[str, Any]:
    audit = AuditTrail().watch(Writer, Book)
    catalogue = Catalogue()
    Book.on("beforeSave", stamp_timestamps)
    try:
        butler = Writer(name="Octavia Butler").save()
        kindred = Book(title="Kindred", author_id=butler.id).save()
        dawn = Book(title="Dawn", author_id=butler.id).save()
        kindred["published"] = True
        kindred.save()
        dawn.remove()
        return {
            "events": [(entry["model"], entry["event"]) for entry in audit.entries],
            "catalogue_size": catalogue.size,
            "book": Book.find_by_id(kindred.id).to_dict(),
        }
    finally:
        audit.close()
        catalogue.close()
        Book.off("beforeSave", stamp_timestamps)


if __name__ == "__main__":
    result = run_demo()
    for model_name, event_name in result["events"]:
        print(f"{model_name}: {event_name}")
    print(f"books in catalogue: {result['catalogue_size']}")

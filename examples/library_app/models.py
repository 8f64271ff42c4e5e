"""
Data models for the doclifecycle library example.
"""

from __future__ import annotations

from doclifecycle import Document, Schema, lifecycle_events_plugin

writer_schema = Schema("writer")
writer_schema.plugin(lifecycle_events_plugin)

book_schema = Schema("book")
book_schema.plugin(lifecycle_events_plugin)


class Writer(Document):
    schema = writer_schema


class Book(Document):
    schema = book_schema

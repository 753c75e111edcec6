"""Persistent storage of request collections as a JSON document."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DB_FILE = "rested_data.json"


class StorageError(Exception):
    """Raised when the database cannot be read or written."""


@dataclass
class RestedRequest:
    """A single HTTP request definition."""

    method: str = ""
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    request_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": dict(self.headers),
            "body": self.body,
            "requestName": self.request_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RestedRequest:
        return cls(
            method=data.get("method") or "",
            url=data.get("url") or "",
            headers=dict(data.get("headers") or {}),
            body=data.get("body") or "",
            request_name=data.get("requestName") or "",
        )


@dataclass
class Collection:
    """A named group of saved requests."""

    title: str = ""
    requests: list[RestedRequest] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "requests": [request.to_dict() for request in self.requests],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Collection:
        return cls(
            title=data.get("title") or "",
            requests=[RestedRequest.from_dict(item) for item in data.get("requests") or []],
        )


@dataclass
class Database:
    """All collections known to the application."""

    collections: list[Collection] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"collections": [collection.to_dict() for collection in self.collections]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Database:
        if not isinstance(data, dict):
            raise StorageError("failed to unmarshal DB: top level must be an object")
        return cls(
            collections=[Collection.from_dict(item) for item in data.get("collections") or []]
        )

    def save(self, path: str | Path = DB_FILE) -> None:
        """Write the database to *path* as indented JSON."""
        try:
            text = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"failed to marshal DB: {exc}") from exc
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"failed to write DB to file: {exc}") from exc

    @classmethod
    def load(cls, path: str | Path = DB_FILE) -> Database:
        """Read a database from *path*; a missing file gives an empty database."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        except OSError as exc:
            raise StorageError(f"failed to read DB file: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageError(f"failed to unmarshal DB: {exc}") from exc
        try:
            return cls.from_dict(data)
        except (AttributeError, TypeError) as exc:
            raise StorageError(f"failed to unmarshal DB: {exc}") from exc
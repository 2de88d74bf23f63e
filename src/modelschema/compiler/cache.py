# Copyright 2026 modelschema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Memo of compiled model schemas keyed by model name."""

from __future__ import annotations

import threading

from modelschema.model.schema import CompiledSchema

# ###############
# Public Interface
# ###############


class SchemaCache:
    """Process-scoped memo from model name to its compiled schema.

    Completed entries are never replaced, so reads need no locking. Writers
    hold :attr:`lock` for the duration of a compile request; the lock is
    re-entrant so nested model compilation on the same thread does not block.
    """

    def __init__(self) -> None:
        self._entries: dict[str, CompiledSchema] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Serializes insertions across concurrent compile requests."""
        return self._lock

    def get(self, name: str) -> CompiledSchema | None:
        """Return the compiled schema for *name*, or None on a miss."""
        return self._entries.get(name)

    def put(self, compiled: CompiledSchema) -> CompiledSchema:
        """Store *compiled* unless an entry already exists; return the stored entry."""
        with self._lock:
            return self._entries.setdefault(compiled.name, compiled)

    def clear(self) -> None:
        """Drop every entry, ending the current compilation run."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

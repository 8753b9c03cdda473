# rootconf/provenance.py
"""
rootconf.provenance
-------------------

Tracks which source file produced each top-level configuration key.

Two files can normalize to the same key (``a.b.toml`` next to ``a/b.toml``,
or ``app.json`` next to ``app.toml``). The later one in traversal order wins;
the registry keeps the losers in a history so "why is this value X?" can be
answered after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SourceEntry:
    """Records the origin of a single top-level key.

    Attributes:
        key: The top-level key (e.g., ``"services.mail.smtp"``).
        source: Where it came from. Format examples:
            ``"config:/srv/app/config/services/mail/smtp.toml"``
            ``"root:/srv/app/settings.json"``
    """

    key: str
    source: str

    @property
    def path(self) -> Path:
        """The file path part of ``source``."""
        return Path(self.source.split(":", 1)[1])

    def __repr__(self) -> str:
        return f"{self.key}  ← {self.source}"


@dataclass
class SourceRegistry:
    """Current source per key, plus the chain of sources it replaced."""

    _entries: dict[str, SourceEntry] = field(default_factory=dict)
    _history: dict[str, list[SourceEntry]] = field(default_factory=dict)

    def record(self, key: str, source: str) -> SourceEntry | None:
        """Record that `key` was loaded from `source`.

        Returns:
            The entry that was replaced, or None if the key is new.
        """
        previous = self._entries.get(key)
        if previous is not None:
            self._history.setdefault(key, []).append(previous)
        self._entries[key] = SourceEntry(key=key, source=source)
        return previous

    def get(self, key: str) -> SourceEntry | None:
        return self._entries.get(key)

    def get_history(self, key: str) -> list[SourceEntry]:
        """All entries for `key`, oldest first, ending with the current one."""
        history = list(self._history.get(key, []))
        current = self._entries.get(key)
        if current:
            history.append(current)
        return history

    def all_entries(self) -> dict[str, SourceEntry]:
        return dict(self._entries)

    def merge(self, other: SourceRegistry) -> None:
        """Replay every entry of `other`, history included, into this registry."""
        for key in other._entries:
            for entry in other.get_history(key):
                self.record(entry.key, entry.source)

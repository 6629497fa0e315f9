"""Display helpers that do not depend on Streamlit."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

MAX_CHARACTERS = 280


@dataclass(frozen=True)
class CharacterStatus:
    count: int
    limit: int = MAX_CHARACTERS

    @property
    def over_limit(self) -> bool:
        return self.count > self.limit

    @property
    def label(self) -> str:
        return f"{self.count}/{self.limit}"


def character_status(text: str, limit: int = MAX_CHARACTERS) -> CharacterStatus:
    return CharacterStatus(count=len(text), limit=limit)


def format_created_at(value: str | None) -> str:
    """Render the backend's ISO timestamp as ``YYYY-MM-DD HH:MM``; unparseable input is returned as-is."""
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%Y-%m-%d %H:%M")
    except ValueError:
        return value

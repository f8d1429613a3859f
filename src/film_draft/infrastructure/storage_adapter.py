"""
Storage Adapters

Implementations of the session repository interface: an in-memory one and a
JSON file per channel.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..application.interfaces import ISessionRepository
from ..domain.entities.snapshot import SessionSnapshot
from ..domain.exceptions import StructuralMismatchError

logger = logging.getLogger(__name__)


class MemorySessionRepository(ISessionRepository):
    """In-memory snapshots keyed by channel"""

    def __init__(self):
        self._snapshots: Dict[int, SessionSnapshot] = {}  # channel_id -> snapshot

    async def save_session(self, snapshot: SessionSnapshot) -> None:
        self._snapshots[snapshot.channel_id] = snapshot

    async def get_session(self, channel_id: int) -> Optional[SessionSnapshot]:
        return self._snapshots.get(channel_id)

    async def delete_session(self, channel_id: int) -> None:
        if channel_id in self._snapshots:
            del self._snapshots[channel_id]

    async def get_channel_ids(self) -> List[int]:
        return list(self._snapshots.keys())

    def has_session(self, channel_id: int) -> bool:
        return channel_id in self._snapshots

    def clear_all_sessions(self) -> None:
        """Clear all snapshots (for testing/cleanup)"""
        self._snapshots.clear()


class JsonSessionRepository(ISessionRepository):
    """Snapshots stored as ``<base_dir>/drafts/<channel_id>.json``"""

    def __init__(self, base_dir: Optional[str] = None) -> None:
        base = Path(base_dir or "data")
        self.dir = base / "drafts"
        self.dir.mkdir(parents=True, exist_ok=True)

    def _path(self, channel_id: int) -> Path:
        return self.dir / f"{channel_id}.json"

    async def save_session(self, snapshot: SessionSnapshot) -> None:
        path = self._path(snapshot.channel_id)
        with path.open("w", encoding="utf-8") as f:
            json.dump(snapshot.to_dict(), f, ensure_ascii=False, indent=2)

    async def get_session(self, channel_id: int) -> Optional[SessionSnapshot]:
        path = self._path(channel_id)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StructuralMismatchError(f"Unreadable snapshot {path.name}: {e}") from e
        return SessionSnapshot.from_dict(data)

    async def delete_session(self, channel_id: int) -> None:
        path = self._path(channel_id)
        if path.exists():
            path.unlink()
            logger.debug(f"Deleted snapshot {path}")

    async def get_channel_ids(self) -> List[int]:
        channel_ids = []
        for path in sorted(self.dir.glob("*.json")):
            try:
                channel_ids.append(int(path.stem))
            except ValueError:
                logger.warning(f"Ignoring unexpected file in snapshot dir: {path.name}")
        return channel_ids

"""
Session Snapshot Value Objects

Plain records a persistence layer can store and hand back. A snapshot never
carries draft counters: they are rebuilt by replaying the picks.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..exceptions import StructuralMismatchError


@dataclass(frozen=True)
class SelectorRecord:
    name: str
    color: str
    contrast: str = "white"


@dataclass(frozen=True)
class EntryRecord:
    position: int
    title: str
    year: str = ""
    url_slug: str = ""
    poster_url: str = ""
    suggested_by: Optional[str] = None
    disabled: bool = False
    selected: bool = False
    selector_color: Optional[str] = None
    global_order: Optional[int] = None


@dataclass(frozen=True)
class SessionSnapshot:
    channel_id: int
    selectors: List[SelectorRecord] = field(default_factory=list)
    entries: List[EntryRecord] = field(default_factory=list)
    last_valid_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionSnapshot":
        try:
            return cls(
                channel_id=int(data["channel_id"]),
                selectors=[SelectorRecord(**item) for item in data.get("selectors", [])],
                entries=[EntryRecord(**item) for item in data.get("entries", [])],
                last_valid_url=data.get("last_valid_url"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StructuralMismatchError(f"Malformed session snapshot: {e}") from e

"""Knowledge entry models."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from ..utils.logger import get_logger

logger = get_logger(__name__)


class Role(Enum):
    """Requester roles that gate entries and content variants."""
    STUDENT = "student"
    TEACHER = "teacher"
    PARENT = "parent"
    PROFESSIONAL = "professional"

    @classmethod
    def parse(cls, value: Union["Role", str, None]) -> Optional["Role"]:
        """Return the matching role, or None for anything unrecognized."""
        if isinstance(value, Role):
            return value
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


RoleLike = Union[Role, str]


def _parse_roles(roles: Iterable[RoleLike]) -> FrozenSet[Role]:
    parsed = set()
    for value in roles:
        role = Role.parse(value)
        if role is None:
            logger.warning(f"Ignoring unrecognized role: {value!r}")
            continue
        parsed.add(role)
    return frozenset(parsed)


def normalize_keyword(keyword: str) -> str:
    """Normalize a keyword for indexing and matching."""
    return keyword.strip().lower()


@dataclass(frozen=True)
class RoleContent:
    """Entry text with a mandatory general variant and per-role overrides."""
    general: str
    overrides: Mapping[Role, str] = field(default_factory=dict)

    def __post_init__(self):
        overrides = {}
        for key, text in self.overrides.items():
            role = Role.parse(key)
            if role is None:
                logger.warning(f"Dropping content override for unrecognized role: {key!r}")
                continue
            if text:
                overrides[role] = text
        object.__setattr__(self, "overrides", MappingProxyType(overrides))

    def for_role(self, role: Optional[RoleLike]) -> str:
        """Text for a role, falling back to the general text."""
        parsed = Role.parse(role)
        if parsed is None:
            return self.general
        return self.overrides.get(parsed) or self.general

    def to_dict(self) -> Dict[str, str]:
        """Flatten to {"general": ..., "<role>": ...}."""
        data = {"general": self.general}
        for role in Role:
            if role in self.overrides:
                data[role.value] = self.overrides[role]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "RoleContent":
        """Create from a flat mapping with a required "general" key."""
        if not data.get("general"):
            raise ValueError("content requires a non-empty 'general' text")
        overrides = {key: value for key, value in data.items() if key != "general"}
        return cls(general=data["general"], overrides=overrides)


def as_tuple(value: Any) -> Tuple[Any, ...]:
    """Coerce a list-like field value; a bare string is one item, None is empty."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def parse_confidence(value: Any) -> Optional[float]:
    """Numeric confidence, or None if the value is not a usable number."""
    if isinstance(value, bool):
        return None
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(confidence):
        return None
    return confidence


@dataclass(frozen=True)
class KnowledgeEntry:
    """A single unit of curated knowledge. Immutable; use dataclasses.replace."""
    id: str
    category: str
    keywords: Tuple[str, ...]
    eligible_roles: FrozenSet[Role]
    content: RoleContent
    subcategory: Optional[str] = None
    provenance: Tuple[str, ...] = ()
    confidence: float = 1.0
    last_updated: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        object.__setattr__(self, "keywords", as_tuple(self.keywords))
        object.__setattr__(self, "provenance", as_tuple(self.provenance))
        object.__setattr__(self, "eligible_roles", _parse_roles(as_tuple(self.eligible_roles)))

        content = self.content
        if isinstance(content, str):
            content = RoleContent(general=content)
        elif isinstance(content, dict):
            content = RoleContent.from_dict(content)
        object.__setattr__(self, "content", content)

        confidence = parse_confidence(self.confidence)
        if confidence is None:
            logger.warning(f"Non-numeric confidence {self.confidence!r} for entry {self.id}, using 0.0")
            confidence = 0.0
        elif not 0.0 <= confidence <= 1.0:
            clamped = min(1.0, max(0.0, confidence))
            logger.warning(
                f"Confidence {confidence} for entry {self.id} outside [0, 1], clamped to {clamped}"
            )
            confidence = clamped
        object.__setattr__(self, "confidence", confidence)

    def normalized_keywords(self) -> List[str]:
        """Unique non-blank lower-cased keywords, in declaration order."""
        seen = []
        for keyword in self.keywords:
            normalized = normalize_keyword(keyword)
            if normalized and normalized not in seen:
                seen.append(normalized)
        return seen

    def is_eligible(self, role: Optional[RoleLike]) -> bool:
        """Whether this entry may be surfaced for the given role."""
        parsed = Role.parse(role)
        return parsed is not None and parsed in self.eligible_roles

    def text_for(self, role: Optional[RoleLike]) -> str:
        return self.content.for_role(role)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "category": self.category,
            "subcategory": self.subcategory,
            "keywords": list(self.keywords),
            "eligible_roles": [role.value for role in Role if role in self.eligible_roles],
            "content": self.content.to_dict(),
            "provenance": list(self.provenance),
            "confidence": self.confidence,
            "last_updated": self.last_updated.isoformat()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeEntry":
        """Create from dictionary."""
        for required in ("id", "category", "content"):
            if required not in data:
                raise ValueError(f"knowledge entry is missing '{required}'")

        content = data["content"]
        if isinstance(content, dict):
            content = RoleContent.from_dict(content)

        last_updated = data.get("last_updated")
        if isinstance(last_updated, str):
            last_updated = datetime.fromisoformat(last_updated)

        return cls(
            id=str(data["id"]),
            category=data["category"],
            subcategory=data.get("subcategory"),
            keywords=data.get("keywords", []),
            eligible_roles=data.get("eligible_roles", []),
            content=content,
            provenance=data.get("provenance", []),
            confidence=data.get("confidence", 1.0),
            last_updated=last_updated or datetime.now()
        )


@dataclass
class KnowledgeStats:
    """Aggregate statistics over the entry store."""
    total_entries: int
    categories_count: int
    average_confidence: float
    last_updated: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_entries": self.total_entries,
            "categories_count": self.categories_count,
            "average_confidence": round(self.average_confidence, 4),
            "last_updated": self.last_updated.isoformat() if self.last_updated else None
        }

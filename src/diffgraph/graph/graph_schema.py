from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, List, Optional, Tuple

Vertex = Hashable


@dataclass(frozen=True)
class Edge:
    """
    Directed relation between two vertices.
    """

    source: Vertex
    target: Vertex

    def as_pair(self) -> Tuple[Vertex, Vertex]:
        return (self.source, self.target)

    def reversed(self) -> "Edge":
        return Edge(source=self.target, target=self.source)


@dataclass(frozen=True)
class ChangeSet:
    """
    One section of a change record: the vertices and edges it touched,
    in the order the operation produced them.
    """

    vertices: List[Vertex] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.vertices and not self.edges

    def extend(self, other: "ChangeSet") -> "ChangeSet":
        return ChangeSet(
            vertices=[*self.vertices, *other.vertices],
            edges=[*self.edges, *other.edges],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertices": list(self.vertices),
            "edges": [list(e.as_pair()) for e in self.edges],
        }


def _merge_sections(
    left: Optional[ChangeSet],
    right: Optional[ChangeSet],
) -> Optional[ChangeSet]:
    if left is None:
        return right
    if right is None:
        return left
    return left.extend(right)


@dataclass(frozen=True)
class ChangeResult:
    """
    Structured delta produced by a single graph mutation.

    A section set to ``None`` means nothing of that kind changed. A present
    but empty ``ChangeSet`` is a different answer and is kept as such.
    """

    removed: Optional[ChangeSet] = None
    created: Optional[ChangeSet] = None

    def merge(self, other: Optional["ChangeResult"]) -> "ChangeResult":
        if other is None:
            return self
        return ChangeResult(
            removed=_merge_sections(self.removed, other.removed),
            created=_merge_sections(self.created, other.created),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "removed": self.removed.to_dict() if self.removed is not None else None,
            "created": self.created.to_dict() if self.created is not None else None,
        }


class OutcomeStatus(str, Enum):
    APPLIED = "applied"
    UNCHANGED = "unchanged"
    REJECTED = "rejected"


class RejectionReason(str, Enum):
    DUPLICATE_EDGE = "duplicate_edge"
    REVERSE_EDGE = "reverse_edge"
    UNKNOWN_VERTEX = "unknown_vertex"
    VERTEX_EXISTS = "vertex_exists"
    MISSING_EDGE = "missing_edge"


@dataclass(frozen=True)
class MutationOutcome:
    """
    Result of a mutating call on a DirectedGraph.

    Exactly one of ``change`` (applied) or ``reason`` (rejected) is set;
    an unchanged outcome carries neither.
    """

    status: OutcomeStatus
    change: Optional[ChangeResult] = None
    reason: Optional[RejectionReason] = None
    detail: str = ""

    @staticmethod
    def applied(change: ChangeResult) -> "MutationOutcome":
        return MutationOutcome(status=OutcomeStatus.APPLIED, change=change)

    @staticmethod
    def unchanged(detail: str = "") -> "MutationOutcome":
        return MutationOutcome(status=OutcomeStatus.UNCHANGED, detail=detail)

    @staticmethod
    def rejected(reason: RejectionReason, detail: str) -> "MutationOutcome":
        return MutationOutcome(
            status=OutcomeStatus.REJECTED,
            reason=reason,
            detail=detail,
        )

    @property
    def is_applied(self) -> bool:
        return self.status is OutcomeStatus.APPLIED

    @property
    def is_rejected(self) -> bool:
        return self.status is OutcomeStatus.REJECTED

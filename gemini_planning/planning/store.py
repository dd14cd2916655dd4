"""In-memory project context store.

Contexts live for the lifetime of the process. The store is created at
server start-up and handed to the tool dispatcher.
"""

import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from ..errors import NotFoundError

_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Lower-case a name and join whitespace runs with single hyphens."""
    return _WHITESPACE.sub("-", name.lower())


@dataclass(frozen=True)
class PlanRecord:
    """One generated plan in a context's history."""

    id: str
    timestamp: datetime
    plan: dict
    libraries: tuple = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "plan": self.plan,
            "libraries": list(self.libraries),
        }


@dataclass
class ProjectContext:
    """A planning session for one project."""

    id: str
    project_name: str
    requirements: str
    constraints: Optional[str] = None
    planning_history: List[PlanRecord] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def latest_plan(self) -> Optional[PlanRecord]:
        return self.planning_history[-1] if self.planning_history else None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "projectName": self.project_name,
            "requirements": self.requirements,
            "constraints": self.constraints,
            "planningHistory": [record.to_dict() for record in self.planning_history],
            "createdAt": self.created_at.isoformat(),
        }


class ContextStore:
    """Maps context IDs to project contexts.

    IDs are ``<slug>-<millis>``. The millisecond part never repeats
    within a store, so contexts created in the same millisecond still
    get distinct IDs.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._contexts: Dict[str, ProjectContext] = {}
        self._clock = clock
        self._last_millis = 0

    def _next_millis(self) -> int:
        millis = max(int(self._clock() * 1000), self._last_millis + 1)
        self._last_millis = millis
        return millis

    def __len__(self) -> int:
        return len(self._contexts)

    def __contains__(self, context_id: str) -> bool:
        return context_id in self._contexts

    def create(self, project_name: str, requirements: str, constraints: Optional[str] = None) -> ProjectContext:
        """Create and store a new context."""
        context_id = f"{slugify(project_name)}-{self._next_millis()}"
        context = ProjectContext(
            id=context_id,
            project_name=project_name,
            requirements=requirements,
            constraints=constraints,
        )
        self._contexts[context_id] = context
        return context

    def get(self, context_id: str) -> Optional[ProjectContext]:
        return self._contexts.get(context_id)

    def require(self, context_id: str) -> ProjectContext:
        """Return a context or raise NotFoundError."""
        context = self._contexts.get(context_id)
        if context is None:
            raise NotFoundError(f"Context {context_id} not found")
        return context

    def append_plan(self, context_id: str, plan: dict, library_names: List[str]) -> PlanRecord:
        """Append a plan to a context's history."""
        context = self.require(context_id)
        record = PlanRecord(
            id=f"plan-{self._next_millis()}",
            timestamp=datetime.now(timezone.utc),
            plan=plan,
            libraries=tuple(library_names),
        )
        context.planning_history.append(record)
        return record

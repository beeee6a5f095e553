from dataclasses import dataclass, field
from enum import Enum

from deepclone import CopySettings, DeepCopier, copy_strategy, deep_copy


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Task:
    description: str
    status: TaskStatus


@dataclass
class Agent:
    name: str
    tasks: list[Task] = field(default_factory=list)
    notes: dict[str, list[str]] = field(default_factory=dict)


class Session:
    """Holds a live handle that must never be duplicated."""

    def __init__(self, user: str):
        self.user = user
        self.handle = object()


@copy_strategy(Session)
def reopen_session(session: Session, copy) -> Session:
    """Copy a session by opening a fresh one for the same user."""
    return Session(copy(session.user))


def main() -> None:
    agent = Agent(
        "planner",
        tasks=[Task("Collect data", TaskStatus.PENDING), Task("Analyze data", TaskStatus.PENDING)],
        notes={"ideas": ["split work"]},
    )

    clone = deep_copy(agent)
    clone.tasks[0].status = TaskStatus.COMPLETED
    clone.notes["ideas"].append("merge results")

    print(f"Original: {agent}")
    print(f"Clone:    {clone}")
    print(f"Enums shared: {clone.tasks[1].status is agent.tasks[1].status}")

    session = Session("andrey")
    session_copy = deep_copy(session)
    print(f"Session handle reopened: {session_copy.handle is not session.handle}")

    # Self-referencing graphs need cycle tracking
    ring: list = ["head"]
    ring.append(ring)
    ring_copy = DeepCopier(CopySettings(preserve_cycles=True)).copy(ring)
    print(f"Cycle preserved: {ring_copy[1] is ring_copy}")


if __name__ == "__main__":
    main()

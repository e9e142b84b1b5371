"""
Module: generate.callbacks.checkpoints

Purpose:
    Branch-scoped cursor state for the selection callbacks. Every
    push_frame/push_odometer call from the driver snapshots the cursor
    state of that scope and starts it empty; the matching pop restores
    the snapshot exactly, so re-entering a branch resumes where it was.

Key Classes:
    - SelectionPhase: Per-connector selection state machine
    - ScopedState: Connector-keyed state with push/pop checkpoints
    - Checkpoint: Token describing one pushed snapshot
    - CheckpointError: Raised when push/pop calls are out of step

Used By:
    - generate.callbacks.phased: PhasedCallback (frame and odometer scopes)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

from assembly_toolkit.core.models import Connector

R = TypeVar("R")


class SelectionPhase(Enum):
    """
    Where select() stands for one connector within one frame.

    Transitions are driven by select() only::

        UNATTEMPTED -> OPEN -> LEXICON -> EXHAUSTED

    UNATTEMPTED: open candidates not looked at yet in this frame
    OPEN: iterating over open sections of the frame
    LEXICON: open candidates used up; drawing from the dictionary
    EXHAUSTED: both sources used up; select() answers None until the
               frame scope is popped
    """

    UNATTEMPTED = "unattempted"
    OPEN = "open"
    LEXICON = "lexicon"
    EXHAUSTED = "exhausted"


class CheckpointError(RuntimeError):
    """The driver and the callback disagree about the push/pop nesting."""
    pass


@dataclass(frozen=True)
class Checkpoint:
    """
    Token for one pushed snapshot.

    Returned by ScopedState.push and consumed by ScopedState.pop. Tokens
    are matched by identity, so each one restores exactly one snapshot.

    Attributes:
        scope: Name of the scope ("frame" or "odometer")
        depth: Stack depth after the push (1 = outermost)
        entries: Number of connector entries saved
        owner: The frame or odometer the driver pushed
    """

    scope: str
    depth: int
    entries: int
    owner: Any = field(default=None, compare=False, repr=False)

    def belongs_to(self, owner: Any) -> bool:
        return self.owner is owner or self.owner == owner


class ScopedState(Generic[R]):
    """
    Connector-keyed state with nested checkpoints.

    Records are treated as immutable values: callers replace a record
    with ``set`` rather than mutating it, so a saved snapshot can never
    be changed by later selections.

    Example:
        >>> state = ScopedState[int]("odometer")
        >>> state.set(con, 2)
        >>> token = state.push(odo)
        >>> token
        Checkpoint(scope='odometer', depth=1, entries=1)
        >>> state.get(con) is None
        True
        >>> state.pop(token)
        >>> state.get(con)
        2
    """

    def __init__(self, scope: str) -> None:
        self.scope = scope
        self._current: Dict[Connector, R] = {}
        self._stack: List[Tuple[Checkpoint, Dict[Connector, R]]] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Entries
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, connector: Connector, default: Optional[R] = None) -> Optional[R]:
        return self._current.get(connector, default)

    def set(self, connector: Connector, record: R) -> None:
        self._current[connector] = record

    def erase(self, connector: Connector) -> None:
        self._current.pop(connector, None)

    def __contains__(self, connector: object) -> bool:
        return connector in self._current

    def __len__(self) -> int:
        return len(self._current)

    def snapshot(self) -> Mapping[Connector, R]:
        """Copy of the current entries."""
        return dict(self._current)

    # ─────────────────────────────────────────────────────────────────────────
    # Checkpoints
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def depth(self) -> int:
        return len(self._stack)

    def push(self, owner: Any) -> Checkpoint:
        """
        Save the current entries and start an empty scope.

        Args:
            owner: The frame or odometer the driver pushed

        Returns:
            Token to hand back to pop()
        """
        checkpoint = Checkpoint(
            self.scope, len(self._stack) + 1, len(self._current), owner=owner
        )
        self._stack.append((checkpoint, self._current))
        self._current = {}
        return checkpoint

    def pop(self, checkpoint: Checkpoint) -> None:
        """
        Consume ``checkpoint`` and restore the entries saved with it.

        Raises:
            CheckpointError: If nothing was pushed, or ``checkpoint`` is
                not the innermost outstanding token
        """
        if not self._stack:
            raise CheckpointError(f"pop of {self.scope} scope without a matching push")

        token, saved = self._stack[-1]
        if checkpoint is not token:
            raise CheckpointError(
                f"{self.scope} scope popped out of order at depth {len(self._stack)}"
            )

        self._stack.pop()
        self._current = saved

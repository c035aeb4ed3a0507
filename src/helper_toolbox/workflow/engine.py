from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

WorkflowAction = Callable[["WorkflowContext"], "Awaitable[Any] | Any"]
"""A step: receives the context, returns ``None`` or an awaitable."""


class WorkflowError(Exception):
    pass


class InvalidJumpTargetError(WorkflowError, IndexError):
    pass


@dataclass(frozen=True, slots=True)
class NextValue:
    """Explicit hand-over value for the next step.

    A step settling with ``None`` is indistinguishable from a step settling
    with nothing, so ``None`` falls back to ``ctx.next_value``. Wrap the value
    to pass ``None`` (or anything else) on explicitly.
    """

    value: Any = None


class _RunPointer:
    """Index of the step about to run next, shared by a run and its contexts."""

    __slots__ = ("next_index",)

    def __init__(self) -> None:
        self.next_index = 0


class WorkflowContext:
    """Execution context handed to a single step invocation.

    Positional attributes are fixed for the lifetime of the step. ``result``,
    ``value`` and ``next_value`` are free for the step to overwrite. The
    control operations only move the run's pointer; ``index`` keeps naming the
    step that is currently running.
    """

    def __init__(
        self,
        *,
        count: int,
        executions: int,
        index: int,
        previous_index: int | None,
        previous_value: Any,
        result: Any,
        value: Any,
        pointer: _RunPointer,
        get_state: Callable[[], Any],
        set_state: Callable[[Any], None],
    ) -> None:
        self._count = count
        self._executions = executions
        self._index = index
        self._previous_index = previous_index
        self._previous_value = previous_value
        self._pointer = pointer
        self._get_state = get_state
        self._set_state = set_state

        self.result: Any = result
        self.value: Any = value
        self.next_value: Any = None

    @property
    def count(self) -> int:
        return self._count

    @property
    def executions(self) -> int:
        """Number of steps invoked before this one in the current run."""

        return self._executions

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == self._count - 1

    @property
    def is_between(self) -> bool:
        return 0 < self._index < self._count - 1

    @property
    def previous_index(self) -> int | None:
        return self._previous_index

    @property
    def previous_value(self) -> Any:
        return self._previous_value

    def get_workflow_state(self) -> Any:
        return self._get_state()

    def set_workflow_state(self, value: Any) -> WorkflowContext:
        self._set_state(value)
        return self

    @property
    def workflow_state(self) -> Any:
        return self.get_workflow_state()

    @workflow_state.setter
    def workflow_state(self, value: Any) -> None:
        self.set_workflow_state(value)

    def finish(self) -> WorkflowContext:
        """Make the current step the last one of the run."""

        self._pointer.next_index = self._count
        logger.debug("Workflow finish requested", extra={"index": self._index})
        return self

    def goto(self, index: int) -> WorkflowContext:
        """Run the step at ``index`` next."""

        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidJumpTargetError(f"Jump target must be an int, got {index!r}")
        if index < 0 or index >= self._count:
            raise InvalidJumpTargetError(
                f"Jump target {index} is out of range (0..{self._count - 1})"
            )

        self._pointer.next_index = index
        logger.debug("Workflow jump", extra={"index": self._index, "target": index})
        return self

    def goto_first(self) -> WorkflowContext:
        self._pointer.next_index = 0
        logger.debug("Workflow jump", extra={"index": self._index, "target": 0})
        return self

    def goto_last(self) -> WorkflowContext:
        self._pointer.next_index = self._count - 1
        logger.debug("Workflow jump", extra={"index": self._index, "target": self._count - 1})
        return self

    def __repr__(self) -> str:
        return (
            f"WorkflowContext(index={self._index}, count={self._count}, "
            f"executions={self._executions})"
        )


def _explicit_value(settled: Any) -> tuple[bool, Any]:
    if isinstance(settled, NextValue):
        return True, settled.value
    if settled is None:
        return False, None
    return True, settled


class Workflow:
    """An ordered list of steps executed one after the other.

    Each step decides which step runs next through its context (jump, repeat,
    finish early). ``state`` survives across runs until it is reset.

    Runs started concurrently on the same instance get their own snapshot of
    the steps but share ``state`` without any coordination.
    """

    def __init__(self, *actions: WorkflowAction | None) -> None:
        self._actions: list[WorkflowAction | None] = list(actions)
        self.state: Any = None

    def __len__(self) -> int:
        return len(self._actions)

    def append(self, action: WorkflowAction | None = None) -> Workflow:
        """Add a step at the end. ``None`` is accepted and skipped when run."""

        self._actions.append(action)
        return self

    then = append
    next = append

    def reset(self) -> Workflow:
        """Drop all steps and the state."""

        self._actions = []
        return self.reset_state()

    def reset_state(self) -> Workflow:
        return self.set_state(None)

    def set_state(self, value: Any) -> Workflow:
        self.state = value
        return self

    def _get_state(self) -> Any:
        return self.state

    async def start(self, initial_value: Any = None) -> Any:
        """Run all steps and return the final ``result``.

        The first exception raised by a step (or by the awaitable it returned)
        aborts the run and propagates unchanged.
        """

        actions = list(self._actions)
        count = len(actions)

        pointer = _RunPointer()
        executions = 0
        previous_index: int | None = None
        previous_value: Any = None
        result: Any = None
        value: Any = initial_value

        logger.debug("Workflow started", extra={"count": count})

        while pointer.next_index < count:
            index = pointer.next_index
            pointer.next_index = index + 1

            ctx = WorkflowContext(
                count=count,
                executions=executions,
                index=index,
                previous_index=previous_index,
                previous_value=previous_value,
                result=result,
                value=value,
                pointer=pointer,
                get_state=self._get_state,
                set_state=self.set_state,
            )

            action = actions[index]
            try:
                outcome = action(ctx) if action is not None else None
                if inspect.isawaitable(outcome):
                    outcome = await outcome
            except Exception:
                logger.warning(
                    "Workflow step failed",
                    extra={"index": index, "executions": executions},
                    exc_info=True,
                )
                raise

            provided, settled = _explicit_value(outcome)
            previous_value = settled if provided else ctx.next_value

            previous_index = ctx.index
            result = ctx.result
            value = ctx.value
            executions += 1

        logger.debug("Workflow finished", extra={"count": count, "executions": executions})
        return result

    def run(self, initial_value: Any = None) -> Any:
        """Synchronous wrapper around :meth:`start` for code without a loop."""

        return asyncio.run(self.start(initial_value))


async def start_workflow(*actions: WorkflowAction | None, initial_value: Any = None) -> Any:
    """Build a workflow from ``actions`` and run it once."""

    return await Workflow(*actions).start(initial_value)

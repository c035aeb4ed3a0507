"""Sequential step execution.

A :class:`Workflow` runs its steps one at a time. Every step receives a
:class:`WorkflowContext` through which it can read positional information,
carry values forward, touch the workflow's persistent state and redirect
control flow (jump, repeat, finish early).
"""

from helper_toolbox.workflow.engine import (
    InvalidJumpTargetError,
    NextValue,
    Workflow,
    WorkflowAction,
    WorkflowContext,
    WorkflowError,
    start_workflow,
)

__all__ = [
    "InvalidJumpTargetError",
    "NextValue",
    "Workflow",
    "WorkflowAction",
    "WorkflowContext",
    "WorkflowError",
    "start_workflow",
]

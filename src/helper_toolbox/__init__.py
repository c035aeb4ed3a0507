"""Helper Toolbox.

A resumable step-execution engine (:mod:`helper_toolbox.workflow`) plus a set
of small coercion, hashing, matching and encoding helpers
(:mod:`helper_toolbox.utils`).
"""

__version__ = "0.1.0"

from helper_toolbox.config import ToolboxSettings
from helper_toolbox.workflow import Workflow, WorkflowContext, start_workflow

__all__ = ["__version__", "ToolboxSettings", "Workflow", "WorkflowContext", "start_workflow"]

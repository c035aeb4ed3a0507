#!/usr/bin/env python3
"""Programmatic workflow example.

This demonstrates the workflow engine directly:

* a step fingerprints every file matching the given patterns
* an asynchronous step reads and hashes each matched file
* the persistent workflow state counts runs across `start()` calls
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Sequence

from helper_toolbox.logging import configure_logging
from helper_toolbox.utils.files import glob_files
from helper_toolbox.utils.hashing import hash_data
from helper_toolbox.workflow import Workflow, WorkflowContext

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fingerprint files with a workflow.")
    parser.add_argument("patterns", nargs="+", help='Glob patterns, e.g. "src/**/*.py"')
    parser.add_argument("--runs", type=int, default=2, help="How often to start the workflow")
    return parser.parse_args(argv)


def collect(ctx: WorkflowContext) -> None:
    ctx.value = {"files": glob_files(ctx.value), "digests": {}}
    if not ctx.value["files"]:
        ctx.result = {}
        ctx.finish()


async def fingerprint(ctx: WorkflowContext) -> None:
    await asyncio.sleep(0)
    for name in ctx.value["files"]:
        with open(name, "rb") as f:
            ctx.value["digests"][name] = hash_data(f).hex()


def publish(ctx: WorkflowContext) -> None:
    ctx.workflow_state = (ctx.workflow_state or 0) + 1
    ctx.result = ctx.value["digests"]


async def _run(patterns: list[str], runs: int) -> None:
    workflow = Workflow(collect, fingerprint, publish)
    for _ in range(runs):
        digests = await workflow.start(patterns)
        logger.info("Workflow run finished", extra={"run": workflow.state, "files": len(digests)})
        for name, digest in digests.items():
            print(f"{digest}  {name}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging("INFO")
    asyncio.run(_run(args.patterns, args.runs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Sequential async step runner.

Runs independent steps strictly one after another. A failing step is
reported through the failure callback and never stops the steps after it.

Usage:
    steps = [SequenceStep(function=load, data={"tool_name": "paragraph"})]
    await sequence(steps, on_step_success=ok.append, on_step_failure=bad.append)
"""

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from codex_obs.logging import get_logger

logger = get_logger(__name__)
tracer = trace.get_tracer(__name__)

StepCallback = Callable[[Any], None]


@dataclass(frozen=True)
class SequenceStep:
    """One unit of work: ``function(data)`` may return a value or an awaitable."""

    function: Callable[[Any], Any]
    data: Any = None


async def sequence(
    steps: Iterable[SequenceStep],
    on_step_success: StepCallback,
    on_step_failure: StepCallback,
    *,
    step_timeout: float | None = None,
) -> None:
    """
    Run steps in order, one at a time.

    Each step's callback fires before the next step starts. Callbacks get the
    step's original data, never its return value.

    Args:
        steps: Ordered steps to run
        on_step_success: Called with step.data when the step completes
        on_step_failure: Called with step.data when the step raises or times out
        step_timeout: Seconds to wait on an awaitable step (None = no limit)

    Note:
        Errors raised by the callbacks themselves are not absorbed.
        asyncio.CancelledError propagates and stops the sequence.
    """
    for index, step in enumerate(steps):
        with tracer.start_as_current_span("sequence.step") as span:
            span.set_attribute("sequence.index", index)
            try:
                await _run_step(step, step_timeout)
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.warning(
                    "sequence_step_failed",
                    index=index,
                    data=step.data,
                    error=repr(e),
                )
                succeeded = False
            else:
                logger.debug("sequence_step_succeeded", index=index, data=step.data)
                succeeded = True

            if succeeded:
                on_step_success(step.data)
            else:
                on_step_failure(step.data)


async def _run_step(step: SequenceStep, step_timeout: float | None) -> Any:
    result = step.function(step.data)
    if not inspect.isawaitable(result):
        return result

    if step_timeout is None:
        return await result
    return await asyncio.wait_for(result, timeout=step_timeout)

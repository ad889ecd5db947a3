"""
Timing harness for the collection's routines.

One sample is exactly one call `fn(*make_args())`, timed with
`time.perf_counter_ns`. Building the arguments (copying an array, picking
query nodes) happens outside the timed block, and so do warmup and GC control.

Public API (stable):
    time_call(...) -> dict

Returned dict schema:
    {
        "name": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # set when status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index of the timeout
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Callable, Dict, Tuple

__all__ = ["time_call"]

logger = logging.getLogger(__name__)


def time_call(
    *,
    name: str,
    fn: Callable[..., Any],
    make_args: Callable[[], Tuple[Any, ...]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time `repeats` calls of `fn(*make_args())`.

    Parameters
    ----------
    name : str
        Routine name, copied into the result.
    fn : Callable
        The routine under test.
    make_args : Callable[[], tuple]
        Builds fresh positional arguments for one call. Called untimed before
        every sample, so in-place routines always see pristine input.
    repeats : int
        Number of timed samples.
    warmup : bool
        Make one untimed call first.
    disable_gc : bool
        Collect, then disable the garbage collector around the timed loop.
    timeout_seconds : float
        A sample slower than this marks the run "timeout" and stops sampling.

    Returns
    -------
    dict
        See module docstring.
    """
    if repeats < 0:
        raise ValueError(f"repeats must be nonnegative; got {repeats}")
    if timeout_seconds <= 0:
        raise ValueError(f"timeout_seconds must be positive; got {timeout_seconds}")

    result: Dict[str, Any] = {
        "name": name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            fn(*make_args())
        except Exception as e:
            logger.warning("warmup of %s failed: %r", name, e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            try:
                args = make_args()
                t0 = time.perf_counter_ns()
                fn(*args)
                elapsed = time.perf_counter_ns() - t0
            except Exception as e:
                logger.warning("%s failed at repeat %d: %r", name, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            result["samples_ns"].append(elapsed)
            if elapsed > threshold_ns:
                logger.info("%s exceeded %.3fs at repeat %d", name, timeout_seconds, r)
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result

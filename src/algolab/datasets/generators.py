"""
Array dataset generators for the search and sort routines.

Currently implemented:
- dist == "random":
    Integers drawn uniformly from an inclusive range.

- dist == "nearly_sorted":
    [0, 1, ..., n-1] degraded by ceil(swap_frac * n) random index swaps.

- dist == "few_uniques":
    At most k distinct values from an inclusive range, repeated to length n.

- dist == "sorted":
    Deterministic [0, 1, ..., n-1]. Best case for insertion-style sorts.

- dist == "reversed":
    Deterministic [n-1, ..., 0]. Worst case for insertion-style sorts.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- Ranges in params["range"] are **inclusive** on both ends.
- The caller owns and seeds the RNG; deterministic dists ignore it.
- Returns a plain Python `list[int]`; the routines never see NumPy types.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "nearly_sorted",
    "few_uniques",
    "sorted",
    "reversed",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_FEW_UNIQUES_DEFAULT_RANGE = (0, 4294967295)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer array according to `spec`.

    Parameters
    ----------
    n : int
        Length of the array. Must be >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}, for example

            {"dist": "random", "params": {"range": [0, 1000]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "few_uniques", "params": {"k": 8, "range": [0, 99]}}
            {"dist": "reversed"}
    rng : numpy.random.Generator
        Random number generator owned by the caller.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If `n`, the dist name or its params are invalid.
    """
    _validate_n(n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}

    if dist == "random":
        lo, hi = _parse_range(params, required=True, default=None)
        return _uniform(rng, lo, hi, n)

    if dist == "nearly_sorted":
        return _nearly_sorted(n, _parse_swap_frac(params), rng)

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_range(params, required=False, default=_FEW_UNIQUES_DEFAULT_RANGE)
        return _few_uniques(n, k, lo, hi, rng)

    if dist == "sorted":
        return list(range(n))

    # "reversed"
    return list(range(n - 1, -1, -1))


# ------------------------- builders ------------------------- #


def _uniform(rng: np.random.Generator, lo: int, hi: int, n: int) -> List[int]:
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes `hi` reachable.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _nearly_sorted(n: int, swap_frac: float, rng: np.random.Generator) -> List[int]:
    arr = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if n < 2 or num_swaps == 0:
        return arr
    pairs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in pairs.tolist():
        # i == j is a no-op, so fewer effective swaps than requested is fine.
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, k: int, lo: int, hi: int, rng: np.random.Generator) -> List[int]:
    if n == 0:
        return []
    span = hi - lo + 1
    actual_k = min(k, n, span)

    # Draw from `rng` (not `random.sample`) so the seed alone fixes the output.
    chosen: List[int] = []
    seen = set()
    while len(chosen) < actual_k:
        batch = rng.integers(lo, hi + 1, size=2 * (actual_k - len(chosen)))
        for v in batch.tolist():
            if v not in seen:
                seen.add(v)
                chosen.append(v)
                if len(chosen) == actual_k:
                    break

    picks = rng.integers(0, actual_k, size=n)
    return [chosen[t] for t in picks.tolist()]


# ------------------------- param parsing ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError(f"n must be an int; got {n!r}")
    if n < 0:
        raise ValueError(f"n must be nonnegative; got {n}")


def _parse_range(params: Dict[str, Any], *, required: bool, default: Any) -> Tuple[int, int]:
    """
    Parse params["range"] == [min_int, max_int] (both inclusive).

    Falls back to `default` when the key is absent and not `required`.
    """
    if "range" not in params:
        if required:
            raise ValueError("params.range must be provided as [min, max] (inclusive)")
        return default

    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"params.range must be a 2-element list/tuple [min, max]; got {spec!r}")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"params.range values must be integers; got {spec!r}")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not _is_int_like(k) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return int(k)


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars; bool is not a count.
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)

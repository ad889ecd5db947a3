"""
Sweep runner: times the collection's routines over growing input sizes,
driven by a YAML config.

Usage (from repo root):
    python -m algolab.bench.runner experiments/configs/sorts_and_ancestor.yaml
    python -m algolab.bench.runner CONFIG --log-level DEBUG

Config keys:
    experiment_name, output_dir, seed, repeats, warmup, disable_gc,
    timeout_seconds, sizes                       # required
    dataset: {dist, params}                      # array input for the sorts
    algorithms: [{name, config}, ...]            # names from algolab.algorithms.SORTS
    ancestor: {shape, queries}                   # times closest_common_ancestor

At least one of `algorithms` (with `dataset`) or `ancestor` must be present.

Outputs in a new run directory:
    - config_resolved.yaml    # the config actually used
    - meta.json               # python/library versions, cpu/ram, git commit, sort oracle
    - results.jsonl           # one line per timing sample, timeout or error
    - summary.csv             # median, IQR, min, max per (routine, n)

Design notes:
- For each size n, ONE array and ONE tree are generated and shared by every
  routine at that size.
- A routine that times out or fails at size n is skipped for larger sizes.
- The ancestor sample resolves a fixed batch of `queries` random node pairs,
  so one sample's cost is comparable across sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from algolab.algorithms import SORTS
from algolab.bench.measure import time_call
from algolab.datasets import SUPPORTED_SHAPES, make_dataset, make_tree
from algolab.trees import Node, closest_common_ancestor
from algolab.validate import ORACLE_NAME

logger = logging.getLogger(__name__)
_console = Console()

ANCESTOR_ROUTINE = "closest_common_ancestor"
REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "sizes",
]
SUMMARY_COLUMNS = ["routine", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


# ------------------------- data structures ------------------------- #


@dataclass(frozen=True)
class SortSpec:
    name: str
    sort_fn: Callable[..., List[Any]]
    config: Dict[str, Any]


@dataclass(frozen=True)
class AncestorSpec:
    shape: str
    queries: int


# ------------------------- helpers: IO & meta ------------------------- #


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must hold a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "sort_oracle": ORACLE_NAME,
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- helpers: config ------------------------- #


def _resolve_sorts(cfg_algos: List[Dict[str, Any]]) -> List[SortSpec]:
    specs: List[SortSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        if name not in SORTS:
            raise ValueError(f"Unknown algorithm {name!r}. Supported: {sorted(SORTS)}")

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(SortSpec(name=name, sort_fn=SORTS[name].sort, config=config))
    return specs


def _resolve_ancestor(block: Optional[Dict[str, Any]]) -> Optional[AncestorSpec]:
    if block is None:
        return None
    if not isinstance(block, dict):
        raise ValueError("'ancestor' must be a mapping with 'shape' and 'queries'")
    shape = block.get("shape", "random")
    if shape not in SUPPORTED_SHAPES:
        raise ValueError(f"ancestor.shape {shape!r} unsupported. Supported: {sorted(SUPPORTED_SHAPES)}")
    queries = block.get("queries", 64)
    if not isinstance(queries, int) or queries < 1:
        raise ValueError(f"ancestor.queries must be an integer >= 1; got {queries!r}")
    return AncestorSpec(shape=shape, queries=queries)


def _resolve_sizes(raw: Any) -> List[int]:
    if not isinstance(raw, list) or not raw:
        raise ValueError("Config 'sizes' must be a non-empty list of positive integers")
    if any(not isinstance(n, int) or n < 1 for n in raw):
        raise ValueError(f"Config 'sizes' must hold positive integers; got {raw!r}")
    return list(raw)


# ------------------------- helpers: summary ------------------------- #


def _q1(s: pd.Series) -> float:
    return s.quantile(0.25)


def _q3(s: pd.Series) -> float:
    return s.quantile(0.75)


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = df.groupby(["routine", "n"], as_index=False).agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        q1=("time_ns", _q1),
        q3=("time_ns", _q3),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
    )
    out["iqr_ns"] = out["q3"] - out["q1"]
    out = out[SUMMARY_COLUMNS].copy()
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[
        ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    ].astype("int64")
    return out.sort_values(["routine", "n"], ignore_index=True)


def _format_cell(median_ns: int, iqr_ns: int) -> str:
    return f"{median_ns / 1e6:.3f} ± {iqr_ns / 1e6:.3f}"


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Sweep summary (median ± IQR in ms)")
    table.add_column("Routine", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for routine in summary["routine"].unique():
        row = [str(routine)]
        for n in picks:
            s = summary[(summary["routine"] == routine) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- timed workloads ------------------------- #


def _resolve_batch(root: Node, pairs: Sequence[Tuple[Node, Node]]) -> None:
    for a, b in pairs:
        closest_common_ancestor(root, a, b)


def _query_pairs(nodes: List[Node], queries: int, rng: np.random.Generator) -> List[Tuple[Node, Node]]:
    picks = rng.integers(0, len(nodes), size=(queries, 2)).tolist()
    return [(nodes[i], nodes[j]) for i, j in picks]


# ------------------------- core runner ------------------------- #


def run_experiment(config_path: Path) -> Path:
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    sizes = _resolve_sizes(cfg["sizes"])
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])

    sorts = _resolve_sorts(list(cfg.get("algorithms") or []))
    ancestor = _resolve_ancestor(cfg.get("ancestor"))
    if not sorts and ancestor is None:
        raise ValueError("Config must list 'algorithms' or have an 'ancestor' block")
    dataset_spec: Dict[str, Any] = dict(cfg.get("dataset") or {})
    if sorts and not dataset_spec:
        raise ValueError("Config 'dataset' is required when 'algorithms' are listed")

    run_dir = _ensure_run_dir(Path(cfg["output_dir"]), experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    routines = [s.name for s in sorts] + ([ANCESTOR_ROUTINE] if ancestor else [])
    skipped = {name: False for name in routines}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Routines:[/bold] {', '.join(routines)}")
    logger.debug("sizes=%s repeats=%d warmup=%s disable_gc=%s", sizes, repeats, warmup, disable_gc)

    def record(name: str, n: int, res: Dict[str, Any], extra: Dict[str, Any]) -> None:
        for trial, t_ns in enumerate(res["samples_ns"]):
            _append_jsonl({"routine": name, "n": n, "trial": trial, "time_ns": int(t_ns), **extra}, results_path)
        status = res["status"]
        if status == "ok":
            return
        skipped[name] = True
        logger.info("%s stopped at n=%d (%s); skipping larger sizes", name, n, status)
        line = {"routine": name, "n": n, "status": status, **extra}
        if status == "timeout":
            line["timed_out_on_repeat"] = res["timed_out_on_repeat"]
        else:
            line["error"] = res["error"]
        _append_jsonl(line, results_path)

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        if sorts:
            base = make_dataset(n, dataset_spec, rng)
            for spec in sorts:
                if skipped[spec.name]:
                    continue
                res = time_call(
                    name=spec.name,
                    fn=lambda a, _spec=spec: _spec.sort_fn(a, config=_spec.config),
                    make_args=lambda: (list(base),),
                    repeats=repeats,
                    warmup=warmup,
                    disable_gc=disable_gc,
                    timeout_seconds=timeout_seconds,
                )
                record(spec.name, n, res, {"dataset": dataset_spec, "config": spec.config})

        if ancestor is not None and not skipped[ANCESTOR_ROUTINE]:
            data = make_tree(n, {"shape": ancestor.shape}, rng)
            pairs = _query_pairs(data.nodes, ancestor.queries, rng)
            res = time_call(
                name=ANCESTOR_ROUTINE,
                fn=_resolve_batch,
                make_args=lambda: (data.root, pairs),
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
            )
            record(
                ANCESTOR_ROUTINE,
                n,
                res,
                {"tree": {"shape": ancestor.shape}, "queries": ancestor.queries},
            )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Time the algolab routines from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for algolab loggers (default: WARNING)",
    )
    return p.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse
import csv
import glob
import math
import os
from dataclasses import dataclass
from typing import Dict, List, Tuple

SIZE_COLUMNS = [
    "pk_len_bytes",
    "key_share_len_bytes",
    "ctxt_len_bytes",
    "dec_share_len_bytes",
]


@dataclass(frozen=True)
class Row:
    p_bits: int
    q_bits: int
    t: int
    n: int
    op: str
    warmup: int
    rep: int
    elapsed_ns: int
    sizes: Tuple[int, ...]


def _read_rows(paths: List[str]) -> List[Row]:
    rows: List[Row] = []
    required = {"p_bits", "q_bits", "t", "n", "op", "warmup", "rep", "elapsed_ns", *SIZE_COLUMNS}
    for p in paths:
        with open(p, "r", newline="") as f:
            r = csv.DictReader(f)
            if not required.issubset(set(r.fieldnames or [])):
                missing = required - set(r.fieldnames or [])
                raise ValueError(f"{p}: missing columns {sorted(missing)}")

            for d in r:
                rows.append(
                    Row(
                        p_bits=int(d["p_bits"]),
                        q_bits=int(d["q_bits"]),
                        t=int(d["t"]),
                        n=int(d["n"]),
                        op=str(d["op"]),
                        warmup=int(d["warmup"]),
                        rep=int(d["rep"]),
                        elapsed_ns=int(d["elapsed_ns"]),
                        sizes=tuple(int(d[c]) for c in SIZE_COLUMNS),
                    )
                )
    return rows


def _percentile(sorted_vals: List[int], q: float) -> int:
    """Nearest-rank percentile (q in [0,1])."""
    if not sorted_vals:
        raise ValueError("empty values")
    if q <= 0:
        return sorted_vals[0]
    if q >= 1:
        return sorted_vals[-1]
    k = math.ceil(q * len(sorted_vals)) - 1
    k = max(0, min(k, len(sorted_vals) - 1))
    return sorted_vals[k]


def _summarize(vals: List[int]) -> Dict[str, int]:
    vals_sorted = sorted(vals)
    n = len(vals_sorted)
    mid = n // 2
    median = vals_sorted[mid] if n % 2 else int(round((vals_sorted[mid - 1] + vals_sorted[mid]) / 2))
    return {
        "reps": n,
        "mean_ns": int(round(sum(vals_sorted) / n)),
        "median_ns": median,
        "p95_ns": _percentile(vals_sorted, 0.95),
        "p99_ns": _percentile(vals_sorted, 0.99),
        "min_ns": vals_sorted[0],
        "max_ns": vals_sorted[-1],
    }


def main() -> None:
    ap = argparse.ArgumentParser(description="Aggregate raw benchmark CSVs into a summary.")
    ap.add_argument("--in", dest="inputs", nargs="*", default=None,
                    help="Input CSV files. If omitted, uses --glob.")
    ap.add_argument("--glob", dest="globpat", default="bench/outputs/*.csv",
                    help="Glob pattern for input CSVs (default: bench/outputs/*.csv).")
    ap.add_argument("--out", dest="out", default="bench/outputs/summary.csv",
                    help="Output summary CSV path.")
    ap.add_argument("--include-warmup", action="store_true",
                    help="Include warmup rows (default: excluded).")
    args = ap.parse_args()

    paths = args.inputs if args.inputs else sorted(glob.glob(args.globpat))
    # don't feed a previous summary back in
    paths = [p for p in paths if os.path.abspath(p) != os.path.abspath(args.out)]
    if not paths:
        raise SystemExit(f"No input CSVs found (inputs={args.inputs}, glob={args.globpat}).")

    rows = _read_rows(paths)
    if not args.include_warmup:
        rows = [x for x in rows if x.warmup == 0]

    groups: Dict[Tuple[int, int, int, int, str], List[Row]] = {}
    for x in rows:
        groups.setdefault((x.p_bits, x.q_bits, x.t, x.n, x.op), []).append(x)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.out, "w", newline="") as f:
        w = csv.DictWriter(
            f,
            fieldnames=[
                "p_bits", "q_bits", "t", "n", "op",
                "reps", "mean_ns", "median_ns", "p95_ns", "p99_ns", "min_ns", "max_ns",
                *SIZE_COLUMNS,
            ],
        )
        w.writeheader()

        for (p_bits, q_bits, t, n, op), rs in sorted(groups.items()):
            stats = _summarize([r.elapsed_ns for r in rs])
            # Encoded lengths vary by a byte or two with leading zeros; report the max.
            sizes = {c: max(r.sizes[i] for r in rs) for i, c in enumerate(SIZE_COLUMNS)}
            w.writerow({"p_bits": p_bits, "q_bits": q_bits, "t": t, "n": n, "op": op, **stats, **sizes})

    print(f"Wrote: {args.out}")
    print(f"Inputs: {len(paths)} file(s); rows used: {len(rows)}; groups: {len(groups)}")


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Patch

plt.rcParams.update({
    "font.size": 11,
    "axes.titlesize": 12,
    "axes.labelsize": 11,
    "legend.fontsize": 10,
    "xtick.labelsize": 10,
    "ytick.labelsize": 10,
})

OP_ORDER = ["KeyGen", "Enc", "Dec", "Recover"]
HATCHES = ["///", "\\\\\\", "xx", "..", "++"]


def ns_to_ms(ns: float) -> float:
    return ns / 1e6


def _load_summary(path: str) -> pd.DataFrame:
    df = pd.read_csv(path)
    df["profile"] = df["p_bits"].astype(str) + "/" + df["q_bits"].astype(str)
    df["op"] = pd.Categorical(df["op"], categories=OP_ORDER, ordered=True)
    return df.sort_values(["op", "p_bits", "q_bits"])


def _save(fig, out_dir: str, stem: str) -> None:
    os.makedirs(out_dir, exist_ok=True)
    pdf_path = os.path.join(out_dir, f"{stem}.pdf")
    png_path = os.path.join(out_dir, f"{stem}.png")
    fig.savefig(pdf_path)
    fig.savefig(png_path, dpi=300)
    plt.close(fig)
    print(f"[{stem}] Saved to {pdf_path} and {png_path}")


def _apply_hatches_and_bw_legend(ax: plt.Axes, labels: list[str], legend_title: str) -> None:
    # One bar container per plotted column.
    for i, cont in enumerate(ax.containers):
        if i >= len(labels):
            break
        for p in cont.patches:
            p.set_hatch(HATCHES[i % len(HATCHES)])
            p.set_edgecolor("black")
            p.set_linewidth(0.8)

    handles = [
        Patch(facecolor="white", edgecolor="black", hatch=HATCHES[i % len(HATCHES)], label=label)
        for i, label in enumerate(labels)
    ]
    ax.legend(handles=handles, title=legend_title, frameon=False)


def _latency_figure(df: pd.DataFrame, column: str, title: str, out_dir: str, stem: str) -> None:
    df = df.assign(ms=df[column].apply(ns_to_ms))
    # KeyGen is dominated by the prime search; log scale keeps Dec visible.
    pivot = df.pivot_table(index="op", columns="profile", values="ms", observed=False)

    fig, ax = plt.subplots(figsize=(6.5, 3.8))
    pivot.plot(kind="bar", ax=ax, width=0.75, logy=True)

    ax.set_ylabel("Latency (ms, log)")
    ax.set_xlabel("")
    ax.set_title(title)
    ax.grid(axis="y", linestyle="--", linewidth=0.5, alpha=0.7)
    _apply_hatches_and_bw_legend(ax, [str(c) for c in pivot.columns], legend_title="|p|/|q|")

    fig.tight_layout()
    _save(fig, out_dir, stem)


def plot_fig1_mean_latency(df: pd.DataFrame, out_dir: str) -> None:
    _latency_figure(df, "mean_ns", "Distributed ElGamal Operations (Mean)", out_dir, "fig1_mean_latency")


def plot_fig2_tail_latency_p95(df: pd.DataFrame, out_dir: str) -> None:
    _latency_figure(df, "p95_ns", "Distributed ElGamal Operations (p95)", out_dir, "fig2_tail_latency_p95")


def plot_fig3_size_footprint(df: pd.DataFrame, out_dir: str) -> None:
    """Encoded sizes of the public key, one key share, a ciphertext and one decryption share."""
    metrics = ["pk_len_bytes", "key_share_len_bytes", "ctxt_len_bytes", "dec_share_len_bytes"]
    labels = ["|pk|", "|key share|", "|ctxt|", "|dec share|"]

    sub = df[df["op"] == "Enc"].set_index("profile")[metrics]

    fig, ax = plt.subplots(figsize=(6.8, 3.6))
    sub.rename(columns=dict(zip(metrics, labels))).plot(kind="barh", ax=ax)

    ax.set_xlabel("Size (bytes)")
    ax.set_ylabel("")
    ax.set_title("Encoded Size of Keys, Ciphertexts and Shares")
    ax.grid(axis="x", linestyle="--", linewidth=0.5, alpha=0.7)
    _apply_hatches_and_bw_legend(ax, labels, legend_title="")

    fig.tight_layout()
    _save(fig, out_dir, "fig3_size_footprint")


def plot_fig4_decryption_traffic(df: pd.DataFrame, out_dir: str) -> None:
    """Model: bytes a combiner receives for one decryption = (t+1) * |dec share| + |ctxt|."""
    sub = df[df["op"] == "Recover"]
    quorum = np.arange(2, 33)

    fig, ax = plt.subplots(figsize=(6.5, 3.8))
    for i, (_, row) in enumerate(sub.iterrows()):
        total_kb = (quorum * float(row["dec_share_len_bytes"]) + float(row["ctxt_len_bytes"])) / 1024.0
        ax.plot(
            quorum,
            total_kb,
            linestyle=["-", "--", ":"][i % 3],
            marker=["o", "s", "^"][i % 3],
            markevery=5,
            markerfacecolor="none",
            markeredgecolor="black",
            label=str(row["profile"]),
        )

    ax.set_xlabel("Custodians in quorum (t+1)")
    ax.set_ylabel("Traffic to combiner (KiB)")
    ax.set_title("Decryption Traffic vs. Quorum Size")
    ax.legend(title="|p|/|q|", frameon=False)
    ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.7)

    fig.tight_layout()
    _save(fig, out_dir, "fig4_decryption_traffic")


def main() -> None:
    ap = argparse.ArgumentParser(description="Plot figures from an aggregated summary CSV.")
    ap.add_argument("--summary", default="bench/outputs/summary.csv")
    ap.add_argument("--out-dir", default="bench/figures")
    args = ap.parse_args()

    df = _load_summary(args.summary)
    plot_fig1_mean_latency(df, args.out_dir)
    plot_fig2_tail_latency_p95(df, args.out_dir)
    plot_fig3_size_footprint(df, args.out_dir)
    plot_fig4_decryption_traffic(df, args.out_dir)


if __name__ == "__main__":
    main()

"""
Ordered Tree Demo — Worked examples and visualizations.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from ordered_tree import OrderedTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

HEIGHT_SIZES = [10, 50, 100, 200, 400, 800]
HEIGHT_TRIALS = 20


def build(values):
    tree = OrderedTree()
    for v in values:
        tree.insert(v)
    return tree


def tree_edges(tree):
    """
    Recover (parent, child) pairs and depths from the pre-order sequence.

    A BST is fully determined by its pre-order, so the layout needs nothing
    beyond the public traversals.

    Returns:
        Tuple of (edges, depth) where depth maps each value to its level
    """
    edges = []
    depth = {}
    stack = []
    for v in tree.pre_order():
        last = None
        while stack and stack[-1] < v:
            last = stack.pop()
        if last is not None:
            parent = last
        elif stack:
            parent = stack[-1]
        else:
            parent = None
        if parent is None:
            depth[v] = 0
        else:
            edges.append((parent, v))
            depth[v] = depth[parent] + 1
        stack.append(v)
    return edges, depth


def draw_tree(ax, tree, title, highlight=None):
    """Draw nodes at (in-order rank, -depth)."""
    edges, depth = tree_edges(tree)
    rank = {v: i for i, v in enumerate(tree.in_order())}

    for parent, child in edges:
        ax.plot([rank[parent], rank[child]], [-depth[parent], -depth[child]],
                color="gray", linewidth=1.5, zorder=1)
    for v, i in rank.items():
        color = "tomato" if v == highlight else "steelblue"
        ax.scatter(i, -depth[v], s=600, color=color, zorder=2)
        ax.text(i, -depth[v], str(v), ha="center", va="center",
                color="white", fontweight="bold", zorder=3)

    ax.set_title(title)
    ax.set_xlim(-1, max(len(rank), 1))
    ax.set_ylim(-max(depth.values(), default=0) - 1, 1)
    ax.axis("off")


def example_1_traversals():
    """Traversal orders for the tree built from 5, 3, 8, 1, 4."""
    print("=" * 60)
    print("Example 1: Traversals")
    print("=" * 60)

    tree = build([5, 3, 8, 1, 4])
    print(f"Inserted:   [5, 3, 8, 1, 4]")
    print(f"In-order:   {tree.in_order()}")
    print(f"Pre-order:  {tree.pre_order()}")
    print(f"Post-order: {tree.post_order()}")
    print(f"Height:     {tree.height()}")
    print(f"Insert 3 again -> {tree.insert(3)}")

    fig, ax = plt.subplots(figsize=(8, 5))
    draw_tree(ax, tree, "Tree built from 5, 3, 8, 1, 4", highlight=tree.pre_order()[0])
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversals.png", dpi=150)
    plt.close(fig)

    return fig, tree


def example_2_removal_cases():
    """Leaf, single-child and two-children removals side by side."""
    print("\n" + "=" * 60)
    print("Example 2: Removal Cases")
    print("=" * 60)

    values = [5, 3, 8, 1, 4, 7, 9, 6]
    cases = [
        (1, "Leaf"),
        (7, "One child"),
        (5, "Two children"),
    ]

    fig, axes = plt.subplots(2, len(cases), figsize=(15, 8))
    for col, (target, label) in enumerate(cases):
        tree = build(values)
        draw_tree(axes[0, col], tree, f"Before: remove {target} ({label})", highlight=target)
        removed = tree.remove(target)
        print(f"remove({target}) [{label}] -> {removed}; in-order = {tree.in_order()}")
        draw_tree(axes[1, col], tree, f"After removing {target}")

    tree = build(values)
    print(f"remove(42) [missing] -> {tree.remove(42)}; in-order = {tree.in_order()}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_removal_cases.png", dpi=150)
    plt.close(fig)

    return fig


def example_3_height_growth():
    """Height after sorted vs. shuffled insertion."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth")
    print("=" * 60)

    sorted_heights = []
    shuffled_mean = []
    shuffled_std = []
    for n in HEIGHT_SIZES:
        sorted_heights.append(build(range(n)).height())
        trials = np.array([build(np.random.permutation(n).tolist()).height()
                           for _ in range(HEIGHT_TRIALS)])
        shuffled_mean.append(trials.mean())
        shuffled_std.append(trials.std())
        print(f"n = {n:4d}: sorted height = {sorted_heights[-1]:4d}, "
              f"shuffled height = {trials.mean():6.2f} ± {trials.std():.2f}")

    sizes = np.array(HEIGHT_SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(sizes, sorted_heights, "o-", color="tomato", linewidth=2, label="Sorted insertion")
    axes[0].errorbar(sizes, shuffled_mean, yerr=shuffled_std, fmt="o-", color="steelblue",
                     linewidth=2, capsize=4, label="Shuffled insertion")
    axes[0].set_xlabel("Number of values")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height vs. Size")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, shuffled_mean, "o-", color="steelblue", linewidth=2, label="Shuffled (mean)")
    axes[1].plot(sizes, 2 * np.log2(sizes), "g--", linewidth=2, label="2·log2(n)")
    axes[1].set_xscale("log")
    axes[1].set_xlabel("Number of values (log scale)")
    axes[1].set_ylabel("Height")
    axes[1].set_title("Shuffled Insertion vs. Logarithmic Bound")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, sorted_heights, shuffled_mean


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Ordered Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Unbalanced Binary Search Tree", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
Values are kept unique and ordered using only the < operator.
Two values are the same element when neither is less than the other.

• Operations:
  - insert / remove return True or False, never raise on a miss
  - contain and find_node are read-only lookups
  - in_order, pre_order, post_order build a fresh list per call

• Removal:
  - Zero or one child: the node is spliced out of its parent
  - Two children: the node takes its in-order successor's value
    and the successor is spliced out of the right subtree

Key Findings:
  1. Sorted insertion degenerates into a list (height = n)
  2. Shuffled insertion stays close to logarithmic height
  3. Loop-based descents handle degenerate trees without recursion
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, img_name in figures_data:
            fig_copy = plt.figure(figsize=(11, 8.5))
            fig_copy.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / img_name)
            ax = fig_copy.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig_copy)
            plt.close(fig_copy)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "ORDERED TREE DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_traversals()
    example_2_removal_cases()
    example_3_height_growth()

    generate_pdf_report([
        ("Example 1: Traversals", "01_traversals.png"),
        ("Example 2: Removal Cases", "02_removal_cases.png"),
        ("Example 3: Height Growth", "03_height_growth.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()

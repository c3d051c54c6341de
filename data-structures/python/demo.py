"""
Binary Tree Demo -- Traversal orders, the three removal cases, height versus
insertion order, and lookup cost on balanced-looking vs degenerate trees.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_tree import BinaryTree, TraversalOrder

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

SCENARIO = [5, 3, 8, 1, 4, 7, 9]
SIZES = [50, 100, 200, 400, 800, 1200]
N_TRIALS = 5
N_LOOKUPS = 200


def _node_positions(tree):
    """x = in-order rank, y = -depth, plus parent->child edges."""
    positions = {}
    edges = []
    rank = 0
    stack = []
    node = tree._root
    depth = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        node, depth = stack.pop()
        positions[id(node)] = (rank, -depth, node.value)
        rank += 1
        for child in (node.left, node.right):
            if child is not None:
                edges.append((id(node), id(child)))
        node = node.right
        depth += 1
    return positions, edges


def _draw_tree(ax, tree, title, highlight=None):
    positions, edges = _node_positions(tree)
    for parent, child in edges:
        x0, y0, _ = positions[parent]
        x1, y1, _ = positions[child]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1.2, zorder=1)
    for x, y, value in positions.values():
        color = COLORS["orange"] if value == highlight else COLORS["blue"]
        ax.scatter([x], [y], s=600, color=color, edgecolor="white", zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white",
                fontsize=10, fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.axis("off")
    ax.margins(0.15)


# ---------------------------------------------------------------------------
# Example 1: Traversal Orders and Removal Cases
# ---------------------------------------------------------------------------
def example_1_traversals_and_removal():
    """Walk the reference tree in all three orders and exercise each removal case."""
    print("=" * 60)
    print("Example 1: Traversal Orders and Removal Cases")
    print("=" * 60)

    tree = BinaryTree(SCENARIO)
    print(f"\n  Inserted: {SCENARIO}")
    for order in TraversalOrder:
        visited = []
        tree.traverse(visited.append, order)
        print(f"  {order.value:>10}: {visited}")
    print(f"  Lazy iteration: {list(tree)}")

    cases = [
        ("No right child (remove 8 from 5,3,8,7)", [5, 3, 8, 7], 8),
        ("Right child has no left (remove 3)", [5, 3, 8, 1, 4], 3),
        ("Successor from right subtree (remove 5)", SCENARIO, 5),
    ]

    fig, axes = plt.subplots(2, 3, figsize=(18, 10))
    for col, (name, values, target) in enumerate(cases):
        before = BinaryTree(values)
        after = before.copy()
        removed = after.remove(target)
        print(f"\n  {name}")
        print(f"    before pre-order: {before.pre_order()}")
        print(f"    after  pre-order: {after.pre_order()} (removed={removed})")
        assert list(after) == sorted(v for v in values if v != target)

        _draw_tree(axes[0, col], before, f"Before: {name}", highlight=target)
        _draw_tree(axes[1, col], after, f"After removing {target}")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversals_and_removal.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/01_traversals_and_removal.png")


# ---------------------------------------------------------------------------
# Example 2: Height vs Insertion Order
# ---------------------------------------------------------------------------
def example_2_height_vs_insertion_order():
    """Random permutations stay shallow; sorted input degrades to a chain."""
    print("\n" + "=" * 60)
    print("Example 2: Height vs Insertion Order")
    print("=" * 60)

    random_heights = []
    sorted_heights = []

    print(f"\n  {'n':>6} {'random (mean)':>15} {'sorted':>8} {'log2(n)':>9}")
    print(f"  {'-'*42}")
    for n in SIZES:
        heights = [BinaryTree(np.random.permutation(n).tolist()).height()
                   for _ in range(N_TRIALS)]
        random_heights.append(np.mean(heights))
        sorted_heights.append(BinaryTree(range(n)).height())
        print(f"  {n:>6} {random_heights[-1]:>15.1f} {sorted_heights[-1]:>8} {np.log2(n):>9.2f}")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))

    axes[0].plot(sizes, sorted_heights, "o-", color=COLORS["red"], linewidth=2,
                 label="Sorted insertion")
    axes[0].plot(sizes, random_heights, "s-", color=COLORS["green"], linewidth=2,
                 label=f"Random insertion (mean of {N_TRIALS})")
    axes[0].set_xlabel("Number of values")
    axes[0].set_ylabel("Tree height")
    axes[0].set_title("Height: O(n) vs O(log n)", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, random_heights, "s-", color=COLORS["green"], linewidth=2,
                 label="Random insertion")
    axes[1].plot(sizes, np.ceil(np.log2(sizes + 1)), "--", color=COLORS["purple"],
                 label="ceil(log2(n + 1)) (perfectly balanced)")
    axes[1].set_xscale("log")
    axes[1].set_xlabel("Number of values (log scale)")
    axes[1].set_ylabel("Tree height")
    axes[1].set_title("Random trees grow logarithmically", fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_height_vs_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/02_height_vs_order.png")


# ---------------------------------------------------------------------------
# Example 3: Lookup Cost
# ---------------------------------------------------------------------------
def example_3_lookup_cost():
    """Median per-lookup time of contains() on random vs sorted trees."""
    print("\n" + "=" * 60)
    print("Example 3: Lookup Cost")
    print("=" * 60)

    random_times = []
    sorted_times = []

    print(f"\n  {'n':>6} {'random (us)':>13} {'sorted (us)':>13} {'ratio':>8}")
    print(f"  {'-'*44}")
    for n in SIZES:
        random_tree = BinaryTree(np.random.permutation(n).tolist())
        sorted_tree = BinaryTree(range(n))
        targets = np.random.randint(0, n, size=N_LOOKUPS).tolist()

        runs = {"random": [], "sorted": []}
        for label, tree in (("random", random_tree), ("sorted", sorted_tree)):
            for _ in range(3):
                t0 = time.perf_counter()
                for target in targets:
                    tree.contains(target)
                runs[label].append((time.perf_counter() - t0) / N_LOOKUPS)

        t_random = np.median(runs["random"]) * 1e6
        t_sorted = np.median(runs["sorted"]) * 1e6
        random_times.append(t_random)
        sorted_times.append(t_sorted)
        print(f"  {n:>6} {t_random:>13.2f} {t_sorted:>13.2f} {t_sorted / t_random:>7.1f}x")

    fig, ax = plt.subplots(figsize=(9, 5.5))
    ax.plot(SIZES, sorted_times, "o-", color=COLORS["red"], linewidth=2, label="Sorted insertion")
    ax.plot(SIZES, random_times, "s-", color=COLORS["green"], linewidth=2, label="Random insertion")
    ax.set_xlabel("Number of values")
    ax.set_ylabel("Time per contains() (us)")
    ax.set_title("Lookup cost follows tree height", fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "03_lookup_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("\n  Saved: viz/03_lookup_cost.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Collect the visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Search Tree", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Unbalanced, duplicate-friendly, walked without recursion",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Smaller values go left, equal or greater values go right.\n"
            "Removal splices out the first match with one of three cases:\n"
            "promote the left subtree, promote a right child with no left child,\n"
            "or move up the in-order successor.\n\n"
            "This demo covers:\n"
            "  1. Pre-, post- and in-order walks and the three removal cases\n"
            "  2. Height under random vs sorted insertion\n"
            "  3. contains() cost under random vs sorted insertion\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_traversals_and_removal.png": "Example 1: Traversal Orders and Removal Cases",
            "02_height_vs_order.png": "Example 2: Height vs Insertion Order",
            "03_lookup_cost.png": "Example 3: Lookup Cost",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print(f"Sizes: {SIZES}")
    print()

    example_1_traversals_and_removal()
    example_2_height_vs_insertion_order()
    example_3_lookup_cost()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()

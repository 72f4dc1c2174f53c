"""
AVL Tree Demo -- Insertion walkthrough, the four rotation cases, height growth
against the logarithmic bound, and a drawing of a balanced tree.

Generates:
- viz/*.png -- Individual visualization files

Run with ``python -m avltree.demo``.
"""

from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from avltree.avl_tree import AVLTree, balance_factor

SEED = 42
VIZ_DIR = Path(__file__).parent / "viz"

DEMO_VALUES = [10, 20, 30, 40, 50, 25]
SIZES = [1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096]

ROTATION_CASES = [
    ("Left-Left (single right)", [30, 20, 10]),
    ("Right-Right (single left)", [10, 20, 30]),
    ("Left-Right (double)", [30, 10, 20]),
    ("Right-Left (double)", [10, 30, 20]),
]

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def avl_height_bound(n):
    return 1.44 * np.log2(np.asarray(n) + 2)


def height_growth(sizes, rng):
    """Heights after sorted and shuffled insertion of ``n`` distinct keys."""
    sorted_heights = []
    random_heights = []
    for n in sizes:
        sorted_heights.append(AVLTree.from_iterable(range(n)).height())
        keys = rng.permutation(n).tolist()
        random_heights.append(AVLTree.from_iterable(keys).height())
    return np.array(sorted_heights), np.array(random_heights)


def tree_layout(tree):
    """Map each value to ``(x, depth)``; x is the inorder rank."""
    positions = {}
    edges = []
    rank = 0

    def walk(node, depth):
        nonlocal rank
        if node is None:
            return
        walk(node.left, depth + 1)
        positions[node.value] = (rank, depth)
        rank += 1
        walk(node.right, depth + 1)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.value, child.value))

    walk(tree.root, 0)
    return positions, edges


# ---------------------------------------------------------------------------
# Example 1: Insertion Walkthrough
# ---------------------------------------------------------------------------
def example_1_insertion_walkthrough():
    print("=" * 60)
    print("Example 1: Insertion Walkthrough")
    print("=" * 60)

    tree: AVLTree[int] = AVLTree()
    print(f"\n  Inserting values: {', '.join(str(v) for v in DEMO_VALUES)}")
    for value in DEMO_VALUES:
        tree.insert(value)
        print(f"    insert {value:>3} -> root={tree.root.value}, height={tree.height()}")

    print()
    print(f"  {tree.format_inorder()}")
    print(f"  {tree.format_level_order()}")
    print(f"  Tree Height: {tree.height()}")
    return tree


# ---------------------------------------------------------------------------
# Example 2: Rotation Cases
# ---------------------------------------------------------------------------
def example_2_rotation_cases():
    print("\n" + "=" * 60)
    print("Example 2: Rotation Cases")
    print("=" * 60)

    results = []
    for name, order in ROTATION_CASES:
        tree = AVLTree.from_iterable(order)
        root = tree.root
        results.append((name, root.value, tree.height()))
        print(f"\n  {name}: insert {order}")
        print(f"    root={root.value}, height={tree.height()}, "
              f"balance={balance_factor(root)}")
        print(f"    {tree.format_level_order()}")
    return results


# ---------------------------------------------------------------------------
# Example 3: Height Growth
# ---------------------------------------------------------------------------
def example_3_height_growth():
    print("\n" + "=" * 60)
    print("Example 3: Height Growth vs Logarithmic Bound")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes = np.array(SIZES)
    sorted_heights, random_heights = height_growth(SIZES, rng)
    optimal = np.ceil(np.log2(sizes + 1))
    bound = avl_height_bound(sizes)

    print(f"\n  {'n':>6} {'sorted':>7} {'random':>7} {'optimal':>8} {'bound':>7}")
    for n, hs, hr, opt, b in zip(sizes, sorted_heights, random_heights, optimal, bound):
        print(f"  {n:>6} {hs:>7} {hr:>7} {int(opt):>8} {b:>7.2f}")

    within = np.all(sorted_heights <= bound) and np.all(random_heights <= bound)
    print(f"\n  All heights within 1.44 log2(n+2): {'YES' if within else 'NO'}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, sorted_heights, "o-", color=COLORS["blue"], linewidth=2,
            label="Sorted insertion")
    ax.plot(sizes, random_heights, "s-", color=COLORS["green"], linewidth=2,
            label="Random insertion")
    ax.plot(sizes, optimal, "--", color=COLORS["dark"], label="ceil(log2(n+1))")
    ax.plot(sizes, bound, "--", color=COLORS["red"], label="1.44 log2(n+2)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Distinct keys inserted (n)")
    ax.set_ylabel("Tree height")
    ax.set_title("AVL Height Stays Logarithmic", fontsize=12, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = VIZ_DIR / "01_height_growth.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"\n  Saved: {path.name}")
    return sorted_heights, random_heights


# ---------------------------------------------------------------------------
# Example 4: Tree Layout
# ---------------------------------------------------------------------------
def example_4_tree_layout():
    print("\n" + "=" * 60)
    print("Example 4: Tree Layout")
    print("=" * 60)

    tree = AVLTree.from_iterable(range(1, 16))
    positions, edges = tree_layout(tree)
    heights = dict(tree.level_order())
    print(f"\n  {tree.format_level_order()}")

    fig, ax = plt.subplots(figsize=(12, 6))
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [-y0, -y1], color=COLORS["dark"], linewidth=1, zorder=1)
    for value, (x, depth) in positions.items():
        ax.scatter(x, -depth, s=700, color=COLORS["orange"], edgecolor="white", zorder=2)
        ax.text(x, -depth, str(value), ha="center", va="center", fontsize=10,
                fontweight="bold", zorder=3)
        ax.text(x, -depth - 0.3, f"h:{heights[value]}", ha="center", va="top", fontsize=8)
    ax.set_title("AVL Tree after inserting 1..15 in order", fontsize=12, fontweight="bold")
    ax.axis("off")
    fig.tight_layout()
    path = VIZ_DIR / "02_tree_layout.png"
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"\n  Saved: {path.name}")
    return positions


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("AVL Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    VIZ_DIR.mkdir(exist_ok=True)

    example_1_insertion_walkthrough()
    example_2_rotation_cases()
    example_3_height_growth()
    example_4_tree_layout()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print("=" * 60)


if __name__ == "__main__":
    main()


from bstlab.tree import BinarySearchTree

SAMPLE = [7, 1, 9, 8, 11]
SAMPLE_REORDERED = [7, 9, 1, 8, 11]


def run_smoke_test():
    print("--- BinarySearchTree smoke test ---")
    t = BinarySearchTree(SAMPLE)
    s = BinarySearchTree(SAMPLE_REORDERED)

    print(f"Inserted {SAMPLE} -> in-order {list(t)}")
    print(f"node_count={t.node_count()} height={t.height()} is_full={t.is_full()}")
    print(f"min={t.find_min()} max={t.find_max()}")

    print(f"t.equals(t.copy()): {t.equals(t.copy())}")
    print(f"t is t.copy(): {t is t.copy()}")
    print(f"t.equals(s) for order {SAMPLE_REORDERED}: {t.equals(s)}")
    print(f"t.is_mirror(t.mirror()): {t.is_mirror(t.mirror())}")

    print("Levels:")
    t.print_levels()

    pivot = t.rotate_right(t.root())
    print(f"After rotate_right at root, new root={pivot.get_element()}:")
    t.print_levels()
    t.rotate_left(pivot)

    t.remove(7)
    print(f"After remove(7): in-order {list(t)}, root={t.root().get_element()}")

    print("Copy contents:")
    t.copy().print_tree()


if __name__ == "__main__":
    run_smoke_test()

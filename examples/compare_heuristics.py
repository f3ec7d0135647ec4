"""Example: crossing counts of every heuristic on a circulant graph."""

from gridcross import Heuristic, compute_layout

VERTICES = 16
STEPS = (1, 5)


def main() -> None:
    adjacency = [[] for _ in range(VERTICES)]
    for v in range(VERTICES):
        for step in STEPS:
            w = (v + step) % VERTICES
            adjacency[v].append(w)
            adjacency[w].append(v)
    edge_count = VERTICES * len(STEPS)

    for choice in Heuristic:
        if choice == Heuristic.BRUTE_FORCE:
            continue
        result = compute_layout(VERTICES, edge_count, adjacency, int(choice))
        print(f"{choice.name:<14} k={result.k} crossings={result.crossings}")


if __name__ == "__main__":
    main()

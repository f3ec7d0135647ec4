"""Example pipeline: parse an edge list and lay it out on the jittered grid."""

from gridcross import compute_layout, parse_edge_list

TEXT = """
0 1
0 2
0 3
0 4
1 2
1 3
1 4
2 3
2 4
3 4
"""


def main() -> None:
    graph = parse_edge_list(TEXT)
    graph.validate()
    result = compute_layout(graph.vertex_count, graph.edge_count, graph.adjacency, 0)
    print("k:", result.k)
    print("Heuristic:", result.heuristic.name if result.heuristic is not None else None)
    print("Crossings:", result.crossings)
    for vertex, (x, y) in enumerate(result.positions):
        print(f"{vertex}: ({x:.6f}, {y:.6f})")


if __name__ == "__main__":
    main()

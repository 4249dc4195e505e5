"""
Basic usage example for circuitry.

This example demonstrates:
1. Parsing junction box positions
2. Connecting the shortest edges and sizing the circuits
3. Finding the connection that joins everything into one circuit
"""

from circuitry import AnalysisConfig, CircuitAnalyzer, parse_points

BOXES = """\
162,817,812
57,618,57
906,360,560
592,479,940
352,342,300
466,668,158
542,29,236
431,825,988
739,650,466
52,470,668
216,146,977
819,987,18
117,168,530
805,96,715
346,949,466
970,615,88
941,993,340
862,61,35
984,92,344
425,690,689
"""


def main() -> None:
    # 1. Parse points; list position is each box's identity
    points = parse_points(BOXES)
    print(f"Loaded {len(points)} junction boxes")

    # 2. Join the 10 shortest connections
    analyzer = CircuitAnalyzer(points, AnalysisConfig(edge_capacity=10))
    circuits = analyzer.connect_shortest()
    print(f"\nAfter {circuits.edges_used} shortest connections:")
    print(f"  circuits: {len(circuits.component_sizes)}")
    print(f"  largest:  {list(circuits.component_sizes[:3])}")
    print(f"  product:  {circuits.product}")

    # 3. Keep connecting until there is a single circuit
    final = analyzer.final_connection()
    if final.last_merge is not None:
        a = points[final.last_merge.u]
        b = points[final.last_merge.v]
        print(f"\nLast connection: {a.as_tuple()} - {b.as_tuple()}")
    print(f"  x product: {final.x_product}")


if __name__ == "__main__":
    main()

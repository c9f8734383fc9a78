"""
Check Prim's MST on a graph directory against NetworkX
"""

import argparse
import json
import sys

import networkx as nx

from create_graph_files import load_graph
from prim_mst import GraphError, PrimMST


def check_mst(graph_dir="graph_data", strategy="heap", start=0):
    """Run Prim's MST on graph_dir and compare with networkx. Returns a report dict."""
    graph = load_graph(graph_dir)
    result = PrimMST(graph, strategy=strategy).run(start=start)

    G = graph.to_networkx()
    mst = nx.minimum_spanning_tree(G)
    expected_weight = sum(d["weight"] for _, _, d in mst.edges(data=True))
    connected = graph.vertex_count > 0 and nx.is_connected(G)

    if connected:
        is_correct = (
            result.total_weight == expected_weight
            and len(result.edges()) == mst.number_of_edges()
            and nx.is_tree(result.to_networkx())
        )
    else:
        # Only the component holding the start vertex is spanned
        component = nx.node_connected_component(G, start) if graph.vertex_count else set()
        sub_mst = nx.minimum_spanning_tree(G.subgraph(component))
        sub_weight = sum(d["weight"] for _, _, d in sub_mst.edges(data=True))
        is_correct = result.total_weight == sub_weight and set(
            result.unreached()
        ) == set(G.nodes()) - component

    return {
        "graph": graph,
        "result": result,
        "expected_mst": mst,
        "expected_weight": expected_weight,
        "connected": connected,
        "is_correct": is_correct,
    }


def print_report(report):
    graph = report["graph"]
    result = report["result"]
    mst = report["expected_mst"]

    print("Expected MST edges (NetworkX):")
    for u, v in sorted(tuple(sorted(e)) for e in mst.edges()):
        print(f"  ({u},{v}): {mst[u][v]['weight']}")
    print(f"\nTotal weight: {report['expected_weight']}")
    print(f"Number of edges: {mst.number_of_edges()}")

    print("\nPrim MST edges (parent - child):")
    for p, child, w in result.weighted_edges():
        print(f"  {p} - {child}: {w}")
    print(f"\nTotal weight: {result.total_weight}")
    print(f"Number of edges: {len(result.edges())}")

    print(f"\nOriginal graph connected: {report['connected']}")
    print(f"MST spanning: {result.is_spanning()}")
    if result.unreached():
        print(f"⚠ Unreached nodes from node {result.root}: {result.unreached()}")

    if report["is_correct"]:
        print("✓ Prim MST matches NetworkX")
    else:
        print("✗ Prim MST does NOT match NetworkX")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Verify Prim's MST against NetworkX")
    parser.add_argument(
        "--graph-dir",
        type=str,
        default="graph_data",
        help="Directory holding graph_metadata.json (default: graph_data)",
    )
    parser.add_argument(
        "--strategy", choices=PrimMST.STRATEGIES, default="heap", help="(default: heap)"
    )
    parser.add_argument("--start", type=int, default=0, help="Root vertex (default: 0)")
    args = parser.parse_args(argv)

    try:
        report = check_mst(args.graph_dir, strategy=args.strategy, start=args.start)
    except FileNotFoundError as e:
        print(f"ERROR: {e}")
        return 1
    except (GraphError, json.JSONDecodeError) as e:
        print(f"ERROR: invalid graph in {args.graph_dir}: {e}")
        return 1

    print_report(report)
    return 0 if report["is_correct"] else 1


if __name__ == "__main__":
    sys.exit(main())

"""
Create and load graph files for Prim's MST
Each node gets a separate file with its neighbor information, plus a
graph_metadata.json holding the full edge list
"""

import networkx as nx
import random
import json
import os
import matplotlib.pyplot as plt

from prim_mst import Graph, InvalidArgument


METADATA_FILE = "graph_metadata.json"


def create_random_graph(num_nodes=6, edge_probability=0.5, seed=42):
    """Create a random connected graph with random weights"""
    random.seed(seed)

    # Generate random graph using Erdos-Renyi model
    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Ensure the graph is connected
    attempts = 0
    while num_nodes > 0 and not nx.is_connected(G) and attempts < 100:
        G = nx.erdos_renyi_graph(
            num_nodes, edge_probability, seed=random.randint(0, 10000)
        )
        attempts += 1

    if num_nodes > 0 and not nx.is_connected(G):
        # Force connectivity by adding edges
        components = list(nx.connected_components(G))
        for i in range(len(components) - 1):
            node1 = list(components[i])[0]
            node2 = list(components[i + 1])[0]
            G.add_edge(node1, node2)

    # Assign random weights to edges
    for u, v in G.edges():
        G[u][v]["weight"] = random.randint(1, 10)

    return G


def write_graph_files(graph, output_dir="graph_data", quiet=False):
    """
    Write graph files for a networkx graph with integer nodes 0..n-1
    Format: node_<id>.json with neighbor information, graph_metadata.json
    with the edge list
    """
    os.makedirs(output_dir, exist_ok=True)

    num_nodes = graph.number_of_nodes()

    if not quiet:
        print(f"Creating graph files for {num_nodes} nodes...")
        print(f"Output directory: {output_dir}")

    for node_id in range(num_nodes):
        neighbors = {}
        for neighbor in graph.neighbors(node_id):
            neighbors[neighbor] = graph[node_id][neighbor]["weight"]

        node_data = {
            "node_id": node_id,
            "neighbors": neighbors,
            "num_neighbors": len(neighbors),
        }

        filename = os.path.join(output_dir, f"node_{node_id}.json")
        with open(filename, "w") as f:
            json.dump(node_data, f, indent=2)

        if not quiet:
            print(f"  Created {filename}: Node {node_id} with {len(neighbors)} neighbors")

    metadata = {
        "num_nodes": num_nodes,
        "num_edges": graph.number_of_edges(),
        "edges": [(u, v, graph[u][v]["weight"]) for u, v in graph.edges()],
    }

    metadata_file = os.path.join(output_dir, METADATA_FILE)
    with open(metadata_file, "w") as f:
        json.dump(metadata, f, indent=2)

    if not quiet:
        print(f"\n  Created {metadata_file}: Graph metadata")

    return output_dir


def write_edge_list(num_nodes, edges, output_dir="graph_data", quiet=False):
    """Write graph files for a vertex count and (u, v, weight) triples"""
    G = nx.Graph()
    G.add_nodes_from(range(num_nodes))
    for u, v, w in edges:
        G.add_edge(u, v, weight=w)
    return write_graph_files(G, output_dir, quiet=quiet)


def load_metadata(graph_dir="graph_data"):
    """Read graph_metadata.json from graph_dir"""
    with open(os.path.join(graph_dir, METADATA_FILE), "r") as f:
        meta = json.load(f)

    if not isinstance(meta, dict):
        raise InvalidArgument(f"{METADATA_FILE} must hold a JSON object")
    for key in ("num_nodes", "edges"):
        if key not in meta:
            raise InvalidArgument(f"{METADATA_FILE} is missing '{key}'")
    if not isinstance(meta["edges"], list):
        raise InvalidArgument(f"'edges' in {METADATA_FILE} must be a list")
    for row in meta["edges"]:
        if not isinstance(row, list) or len(row) != 3:
            raise InvalidArgument(f"edge {row!r} is not a [u, v, weight] triple")
    return meta


def load_graph(graph_dir="graph_data"):
    """Load a Graph from the metadata file in graph_dir"""
    meta = load_metadata(graph_dir)
    return Graph.from_edges(meta["num_nodes"], [tuple(e) for e in meta["edges"]])


def visualize_graph(graph, output_dir):
    """Visualize the graph and save to file"""
    plt.figure(figsize=(10, 8))
    pos = nx.spring_layout(graph, seed=42)

    nx.draw(
        graph,
        pos,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="gray",
        width=2,
    )

    edge_labels = nx.get_edge_attributes(graph, "weight")
    nx.draw_networkx_edge_labels(graph, pos, edge_labels, font_size=10)

    plt.title("Input Graph for Prim's MST", fontsize=14, fontweight="bold")

    output_file = os.path.join(output_dir, "input_graph.png")
    plt.savefig(output_file, dpi=300, bbox_inches="tight")
    print(f"\n  Visualization saved to {output_file}")
    plt.close()


def print_graph_summary(graph):
    """Print summary of the graph"""
    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of nodes: {graph.number_of_nodes()}")
    print(f"Number of edges: {graph.number_of_edges()}")
    print(f"Is connected: {nx.is_connected(graph)}")

    print("\nEdge list (with weights):")
    for u, v, data in sorted(graph.edges(data=True)):
        print(f"  ({u}, {v}): weight = {data['weight']}")

    # Expected MST weight using NetworkX
    mst = nx.minimum_spanning_tree(graph, weight="weight")
    mst_weight = sum(data["weight"] for _, _, data in mst.edges(data=True))
    print(f"\nExpected MST weight (NetworkX): {mst_weight}")
    print("=" * 70)


def main(argv=None):
    """Main function to create graph files"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate graph files for Prim's MST"
    )
    parser.add_argument(
        "--nodes", type=int, default=6, help="Number of nodes (default: 6)"
    )
    parser.add_argument(
        "--edge-prob", type=float, default=0.5, help="Edge probability (default: 0.5)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="graph_data",
        help="Output directory (default: graph_data)",
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip the input graph visualization"
    )

    args = parser.parse_args(argv)

    if args.nodes < 1:
        parser.error("--nodes must be at least 1")

    print("=" * 70)
    print("Graph File Generator for Prim's MST")
    print("=" * 70)

    print(f"\nGenerating random graph...")
    print(f"  Nodes: {args.nodes}")
    print(f"  Edge probability: {args.edge_prob}")
    print(f"  Random seed: {args.seed}")

    graph = create_random_graph(args.nodes, args.edge_prob, args.seed)

    print_graph_summary(graph)

    print("\n" + "=" * 70)
    write_graph_files(graph, args.output_dir)
    if not args.no_plot:
        visualize_graph(graph, args.output_dir)

    print("\n" + "=" * 70)
    print("Graph files created successfully!")
    print("=" * 70)
    print(f"\nTo check Prim's MST against NetworkX:")
    print(f"  python check_mst.py --graph-dir {args.output_dir}")
    print("=" * 70)


if __name__ == "__main__":
    main()

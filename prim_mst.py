"""
Prim's Algorithm Implementation for Minimum Spanning Trees
Frontier kept in a binary heap with lazy deletion of stale entries
"""

import heapq
import json
import os
import random
import networkx as nx
import matplotlib.pyplot as plt


INFINITY = float("inf")


class GraphError(Exception):
    """Base class for graph construction errors"""


class InvalidArgument(GraphError, ValueError):
    """Nonsensical vertex count, vertex id or builder option"""


class OutOfRange(GraphError, IndexError):
    """Vertex index outside [0, V)"""


class InvalidWeight(GraphError, ValueError):
    """Negative or non-numeric edge weight"""


class Graph:
    """Undirected weighted graph stored as adjacency lists"""

    def __init__(self, vertex_count):
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidArgument(f"vertex count must be an integer, got {vertex_count!r}")
        if vertex_count < 0:
            raise InvalidArgument(f"vertex count must be >= 0, got {vertex_count}")

        self.V = vertex_count
        self.adj = [[] for _ in range(vertex_count)]  # (neighbor, weight) pairs
        self._edges = []

    @classmethod
    def from_edges(cls, num_nodes, edges):
        """
        Build a graph from a vertex count and (u, v, weight) triples
        """
        graph = cls(num_nodes)
        for edge in edges:
            if len(edge) != 3:
                raise InvalidArgument(f"edge {edge!r} is not a (u, v, weight) triple")
            graph.add_edge(*edge)
        return graph

    @property
    def vertex_count(self):
        return self.V

    @property
    def edge_count(self):
        return len(self._edges)

    def check_vertex(self, v):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidArgument(f"vertex id must be an integer, got {v!r}")
        if not 0 <= v < self.V:
            raise OutOfRange(f"vertex {v} not in [0, {self.V})")

    def add_edge(self, u, v, weight):
        """Add an undirected edge between u and v"""
        self.check_vertex(u)
        self.check_vertex(v)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise InvalidWeight(f"weight must be a number, got {weight!r}")
        # also rejects NaN
        if not weight >= 0:
            raise InvalidWeight(f"weight must be >= 0, got {weight}")

        self.adj[u].append((v, weight))
        self.adj[v].append((u, weight))
        self._edges.append((u, v, weight))

    def neighbors(self, v):
        """Return (neighbor, weight) pairs of v in insertion order"""
        self.check_vertex(v)
        return tuple(self.adj[v])

    def edges(self):
        """Return every added edge as (u, v, weight), in insertion order"""
        return list(self._edges)

    def to_networkx(self):
        """Convert to a networkx Graph, keeping the cheapest of parallel edges"""
        G = nx.Graph()
        G.add_nodes_from(range(self.V))
        for u, v, w in self._edges:
            if G.has_edge(u, v) and G[u][v]["weight"] <= w:
                continue
            G.add_edge(u, v, weight=w)
        return G

    def __repr__(self):
        return f"Graph(V={self.V}, E={len(self._edges)})"


class MSTResult:
    """Parent-pointer tree produced by a PrimMST run"""

    def __init__(self, root, parent, cost):
        self.root = root
        self.parent = parent
        self.cost = cost

    def edges(self):
        """(parent, child) pairs in increasing order of child"""
        return [(p, child) for child, p in enumerate(self.parent) if p is not None]

    def weighted_edges(self):
        return [
            (p, child, self.cost[child])
            for child, p in enumerate(self.parent)
            if p is not None
        ]

    @property
    def total_weight(self):
        return sum(w for _, _, w in self.weighted_edges())

    def unreached(self):
        """Vertices left out of the tree (graph not connected)"""
        return [
            v
            for v, p in enumerate(self.parent)
            if p is None and v != self.root
        ]

    def is_spanning(self):
        return not self.unreached()

    def format_lines(self):
        return [f"{p} - {child}" for p, child in self.edges()]

    def to_networkx(self):
        T = nx.Graph()
        T.add_nodes_from(range(len(self.parent)))
        for p, child, w in self.weighted_edges():
            T.add_edge(p, child, weight=w)
        return T

    def to_dict(self):
        return {
            "root": self.root,
            "total_weight": self.total_weight,
            "edges": [list(e) for e in self.weighted_edges()],
            "unreached": self.unreached(),
        }

    def __eq__(self, other):
        if not isinstance(other, MSTResult):
            return NotImplemented
        return (self.root, self.parent, self.cost) == (
            other.root,
            other.parent,
            other.cost,
        )

    def __str__(self):
        return "\n".join(self.format_lines())


class PrimMST:
    STRATEGIES = ("heap", "scan")

    def __init__(self, graph, strategy="heap"):
        """
        Initialize Prim's algorithm
        graph: Graph to span, only read during run()
        strategy: "heap" for the O(E log V) lazy-deletion heap,
                  "scan" for the O(V^2) linear scan
        """
        if strategy not in self.STRATEGIES:
            raise InvalidArgument(
                f"unknown strategy {strategy!r}, expected one of {self.STRATEGIES}"
            )
        self.graph = graph
        self.strategy = strategy

    def run(self, start=0):
        """Run Prim's algorithm from start and return an MSTResult"""
        V = self.graph.vertex_count
        if V == 0:
            return MSTResult(start, [], [])
        self.graph.check_vertex(start)

        cost = [INFINITY] * V
        parent = [None] * V
        settled = [False] * V
        cost[start] = 0

        if self.strategy == "heap":
            self._run_heap(cost, parent, settled)
        else:
            self._run_scan(cost, parent, settled)

        return MSTResult(start, parent, cost)

    def _relax(self, v, cost, parent, settled, frontier=None):
        for n, w in self.graph.adj[v]:
            if not settled[n] and w < cost[n]:
                cost[n] = w
                parent[n] = v
                if frontier is not None:
                    heapq.heappush(frontier, (w, n))

    def _run_heap(self, cost, parent, settled):
        frontier = [(cost[v], v) for v in range(len(cost))]
        heapq.heapify(frontier)

        while frontier:
            c, v = heapq.heappop(frontier)
            if settled[v]:
                # Stale entry, a cheaper one was already popped
                continue
            if c == INFINITY:
                # Everything left is unreachable from the start vertex
                break
            settled[v] = True
            self._relax(v, cost, parent, settled, frontier)

    def _run_scan(self, cost, parent, settled):
        for _ in range(len(cost)):
            best = None
            for v in range(len(cost)):
                if not settled[v] and (best is None or cost[v] < cost[best]):
                    best = v
            if best is None or cost[best] == INFINITY:
                break
            settled[best] = True
            self._relax(best, cost, parent, settled)


def prim_mst(graph, start=0, strategy="heap"):
    """Convenience wrapper: build the MST of graph rooted at start"""
    return PrimMST(graph, strategy=strategy).run(start=start)


def visualize(graph, result, save_path="prim_mst.png"):
    """Visualize the graph and MST"""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    G = graph.to_networkx()
    pos = nx.spring_layout(G, seed=42)

    # Original graph
    ax1.set_title("Original Graph", fontsize=14, fontweight="bold")
    nx.draw(
        G,
        pos,
        ax=ax1,
        with_labels=True,
        node_color="lightblue",
        node_size=700,
        font_size=12,
        font_weight="bold",
    )
    edge_labels = nx.get_edge_attributes(G, "weight")
    nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax1)

    # MST
    ax2.set_title("MST (Prim's Algorithm)", fontsize=14, fontweight="bold")
    mst_graph = result.to_networkx()
    unreached = set(result.unreached())
    node_colors = [
        "lightgray" if v in unreached else "lightgreen"
        for v in mst_graph.nodes()
    ]
    nx.draw(
        mst_graph,
        pos,
        ax=ax2,
        with_labels=True,
        node_color=node_colors,
        node_size=700,
        font_size=12,
        font_weight="bold",
        edge_color="red",
        width=3,
    )

    if mst_graph.number_of_edges():
        edge_labels = nx.get_edge_attributes(mst_graph, "weight")
        nx.draw_networkx_edge_labels(mst_graph, pos, edge_labels, ax=ax2)

    plt.tight_layout()
    plt.savefig(save_path, dpi=300, bbox_inches="tight")
    print(f"Visualization saved to {save_path}")
    plt.close()

    return mst_graph


def create_random_graph(num_nodes=8, edge_probability=0.4, seed=42):
    """Create a random connected graph with random weights"""
    random.seed(seed)

    # Generate random graph using Erdos-Renyi model
    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    # Ensure the graph is connected
    while not nx.is_connected(G):
        G = nx.erdos_renyi_graph(
            num_nodes, edge_probability, seed=random.randint(0, 1000)
        )

    # Assign random weights to edges
    edges = []
    for u, v in G.edges():
        weight = random.randint(1, 10)
        edges.append((u, v, weight))

    return num_nodes, edges


def run_experiment(
    num_nodes, edges, experiment_num, strategy="heap", plot=True, output_dir="."
):
    """Run Prim's algorithm on a single graph configuration"""
    print(f"\n{'=' * 70}")
    print(f"Experiment {experiment_num}: {num_nodes} nodes, {len(edges)} edges")
    print("=" * 70)

    graph = Graph.from_edges(num_nodes, edges)
    result = PrimMST(graph, strategy=strategy).run()

    print("MST edges (parent - child):")
    for line in result.format_lines():
        print(f"  {line}")

    # Verify with NetworkX
    G = graph.to_networkx()
    nx_mst = nx.minimum_spanning_tree(G, weight="weight")
    nx_weight = sum(data["weight"] for _, _, data in nx_mst.edges(data=True))

    is_correct = (
        result.total_weight == nx_weight
        and result.is_spanning()
        and nx.is_tree(result.to_networkx())
    )

    print(f"\nMST Weight: {result.total_weight}")
    print(f"MST Edges Found: {len(result.edges())}/{num_nodes - 1} expected")
    print(f"NetworkX MST Weight: {nx_weight}")
    print(f"Status: {'✓ CORRECT' if is_correct else '✗ INCORRECT'}")

    if plot:
        root_folder = os.path.join(output_dir, "mst_visualizations")
        os.makedirs(root_folder, exist_ok=True)
        filename = os.path.join(root_folder, f"prim_mst_exp{experiment_num}.png")
        visualize(graph, result, filename)

    return {
        "experiment": experiment_num,
        "num_nodes": num_nodes,
        "num_edges": len(edges),
        "strategy": strategy,
        "mst_edges": [list(e) for e in result.weighted_edges()],
        "mst_weight": result.total_weight,
        "networkx_weight": nx_weight,
        "is_correct": is_correct,
        "edges_found": len(result.edges()),
        "edges_expected": num_nodes - 1,
    }


GRAPH_CONFIGS = (
    {"num_nodes": 5, "edge_probability": 0.5, "seed": 42},
    {"num_nodes": 6, "edge_probability": 0.4, "seed": 100},
    {"num_nodes": 7, "edge_probability": 0.6, "seed": 200},
    {"num_nodes": 6, "edge_probability": 0.7, "seed": 300},
    {"num_nodes": 10, "edge_probability": 0.8, "seed": 400},
    {"num_nodes": 20, "edge_probability": 0.3, "seed": 500},
)


def run_experiments(configs=None, strategy="heap", plot=True, output_dir="."):
    """Run every graph configuration (GRAPH_CONFIGS by default) and return the results"""
    if configs is None:
        configs = GRAPH_CONFIGS
    all_results = []

    for i, config in enumerate(configs, 1):
        num_nodes, edges = create_random_graph(
            num_nodes=config["num_nodes"],
            edge_probability=config["edge_probability"],
            seed=config["seed"],
        )
        result = run_experiment(
            num_nodes, edges, i, strategy=strategy, plot=plot, output_dir=output_dir
        )
        all_results.append(result)

    return all_results


def main(argv=None):
    """Main function - Loop through multiple graph configurations"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Run Prim's MST on several random graphs and verify with NetworkX"
    )
    parser.add_argument(
        "--strategy",
        choices=PrimMST.STRATEGIES,
        default="heap",
        help="Frontier selection strategy (default: heap)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory for results and visualizations (default: .)",
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip matplotlib visualizations"
    )
    args = parser.parse_args(argv)
    os.makedirs(args.output_dir, exist_ok=True)

    print("=" * 70)
    print(" " * 15 + "Prim's MST - Multiple Experiments")
    print("=" * 70)

    all_results = run_experiments(
        strategy=args.strategy, plot=not args.no_plot, output_dir=args.output_dir
    )

    # Summary
    print("\n" + "=" * 70)
    print(" " * 25 + "SUMMARY")
    print("=" * 70)
    print(
        f"{'Exp':<5} {'Nodes':<7} {'Edges':<7} {'MST Wt':<9} {'Found':<10} {'Status':<10}"
    )
    print("-" * 70)

    for result in all_results:
        status = "✓ PASS" if result["is_correct"] else "✗ FAIL"
        found_str = f"{result['edges_found']}/{result['edges_expected']}"
        print(
            f"{result['experiment']:<5} {result['num_nodes']:<7} {result['num_edges']:<7} "
            f"{result['mst_weight']:<9} {found_str:<10} {status:<10}"
        )

    results_file = os.path.join(args.output_dir, "prim_experiments.json")
    with open(results_file, "w") as f:
        json.dump(all_results, f, indent=2)

    print("\n" + "=" * 70)
    print(f"All results saved to: {results_file}")
    if not args.no_plot:
        plot_dir = os.path.join(args.output_dir, "mst_visualizations")
        print(f"Visualizations saved as: {plot_dir}/prim_mst_exp<N>.png")
    print("=" * 70)


if __name__ == "__main__":
    main()

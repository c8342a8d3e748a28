import numpy as np
import networkx as nx
from pathlib import Path


def parse_atsp(content):
    """Parse TSPLIB ATSP content (FULL_MATRIX edge weights)."""
    lines = content.strip().split('\n')

    # Parse header
    metadata = {}
    i = 0
    while i < len(lines) and not lines[i].strip().startswith('EDGE_WEIGHT_SECTION'):
        if ':' in lines[i]:
            key, value = lines[i].split(':', 1)
            metadata[key.strip()] = value.strip()
        i += 1

    if i >= len(lines):
        raise ValueError("missing EDGE_WEIGHT_SECTION")
    if 'DIMENSION' not in metadata:
        raise ValueError("missing DIMENSION")
    try:
        n = int(metadata['DIMENSION'])
    except ValueError:
        raise ValueError(f"bad DIMENSION: {metadata['DIMENSION']!r}") from None

    # Parse weights, row-major, possibly wrapped over many lines
    tokens = []
    for line in lines[i + 1:]:
        if line.strip().startswith('EOF'):
            break
        tokens.extend(line.split())
        if len(tokens) >= n * n:
            break

    if len(tokens) < n * n:
        raise ValueError(f"expected {n * n} edge weights, found {len(tokens)}")
    try:
        weights = [float(t) for t in tokens[:n * n]]
    except ValueError as e:
        raise ValueError(f"non-numeric edge weight: {e}") from None

    return {
        'metadata': metadata,
        'cost_matrix': np.array(weights, dtype=float).reshape(n, n),
        'n_nodes': n,
    }


def read_atsp(path):
    return parse_atsp(Path(path).read_text())['cost_matrix']


def from_networkx(G, weight="weight"):
    """Dense cost matrix in G's node order; missing edges become inf."""
    if not G.is_directed():
        G = G.to_directed()
    return nx.to_numpy_array(G, weight=weight, nonedge=np.inf)

"""Graph algorithms (BFS, topological sort, generators, diameter bounds) and LP/MILP models."""

__version__ = "0.1.0"

__all__ = [
    "bfs",
    "diameter",
    "flow",
    "generators",
    "graph",
    "jobs",
    "jobs_global",
    "menu",
    "rng",
    "starter",
    "toposort",
]
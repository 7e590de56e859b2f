"""Transitive closure and all-pairs shortest paths on adjacency matrices."""

from __future__ import annotations

from typing import Sequence

INF = 99999
"""Distance used to mark a missing edge."""


def _square_copy(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def warshall(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transitive closure of an adjacency matrix.

    Entries that become reachable are set to 1; existing entries are kept.
    Raises ValueError if the matrix is not square.
    """
    graph = _square_copy(adjacency)
    vertices = range(len(graph))
    for k in vertices:
        for i in vertices:
            for j in vertices:
                if graph[i][k] and graph[k][j]:
                    graph[i][j] = 1
    return graph


def floyd(distances: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances, with INF marking a missing edge.

    Raises ValueError if the matrix is not square.
    """
    dist = _square_copy(distances)
    vertices = range(len(dist))
    for k in vertices:
        for i in vertices:
            for j in vertices:
                through = dist[i][k] + dist[k][j]
                if through < dist[i][j]:
                    dist[i][j] = through
    return dist


def format_closure(matrix: Sequence[Sequence[int]]) -> str:
    """Render a closure matrix under its heading, one row per line."""
    rows = "".join("".join(f"{entry} " for entry in row) + "\n" for row in matrix)
    return "Transitive Closure Matrix:\n" + rows


def format_distances(matrix: Sequence[Sequence[int]]) -> str:
    """Render a distance matrix one row per line, writing INF for missing edges."""
    return "".join(
        "".join("INF " if entry == INF else f"{entry} " for entry in row) + "\n"
        for row in matrix
    )
"""Path reconstruction from a predecessor map."""

from __future__ import annotations

from typing import List, Mapping

from ..domain.models import Path, VertexId


def reconstruct_path(
    previous: Mapping[VertexId, VertexId],
    source: VertexId,
    target: VertexId,
) -> Path:
    """Walk predecessors back from ``target`` and return the forward path.

    Parameters
    ----------
    previous:
        Predecessor map produced by a query. Vertices absent from the map
        have no predecessor.
    source:
        Start vertex of the query that produced ``previous``.
    target:
        Vertex to build the path to.

    Returns
    -------
    tuple
        Vertex ids from ``source`` to ``target`` inclusive, ``(source,)``
        when ``target == source``, or an empty tuple when ``target`` was
        never reached.
    """
    if target != source and target not in previous:
        return ()

    reversed_path: List[VertexId] = [target]
    current = target
    while current in previous:
        current = previous[current]
        reversed_path.append(current)

    reversed_path.reverse()
    return tuple(reversed_path)

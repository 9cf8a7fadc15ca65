"""Exceptions raised by routegraph.

Every fallible graph operation signals one of the failure kinds below instead
of returning a sentinel. All of them derive from :class:`GraphError`, a
``ValueError`` subclass.
"""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for all graph failures."""


class NoSuchVertex(GraphError):
    """An operation referenced a vertex key absent from the graph."""


class NoSuchEdge(GraphError):
    """A direct-adjacency or deletion query found no matching edge."""


class DuplicateEdge(GraphError):
    """An edge insertion targeted an already existing (start, destination) pair."""


class PathTooShort(GraphError):
    """A path-cost evaluation was given fewer than two vertices."""


class NoSuchPath(GraphError):
    """No route exists between the queried endpoints."""


class NoMoreNeighbors(GraphError):
    """A successor query asked for the edge after the last one in a sequence."""


class ConcurrentMutation(GraphError, RuntimeError):
    """The graph changed structurally while a query was reading it."""

"""
Vertex representation for the weighted graph.

A vertex is a named node carrying an arbitrary payload. Once created by the
graph store it is never mutated.
"""

from typing import Generic, TypeVar

T = TypeVar("T")


class pyvertex(Generic[T]):
    """
    Named graph vertex with a generic payload.

    Vertices compare and hash by name, so a vertex can be used directly as a
    key in sets and dictionaries even when its payload is unhashable.
    """

    __slots__ = ("_name", "_data", "_id")

    def __init__(self, name: str, data: T, lVertexID: int = -1):
        """
        Initialize a vertex.

        Args:
            name: Unique vertex name
            data: Payload carried by the vertex
            lVertexID: Stable integer index assigned by the graph store
        """
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_id", lVertexID)

    def __setattr__(self, key, value):
        raise AttributeError(f"pyvertex is immutable, cannot set '{key}'")

    @property
    def name(self) -> str:
        return self._name

    @property
    def data(self) -> T:
        return self._data

    @property
    def lVertexID(self) -> int:
        return self._id

    def __eq__(self, other):
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return f"pyvertex(name={self._name!r}, data={self._data!r})"

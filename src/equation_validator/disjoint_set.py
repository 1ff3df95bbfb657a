"""Disjoint-set forest over named elements.

Elements live in flat parallel lists and are referred to by their integer
index (``ElementRef``). An element is a root when its parent index is its
own index. Union is by rank only: ``find_representative`` never compresses
paths, so tree shape depends only on the order of ``union`` calls and the
walk stays O(log n) deep.
"""

from collections import defaultdict
from typing import NewType

from equation_validator.errors import UnknownElementError
from equation_validator.logging import get_logger

logger = get_logger(__name__)

ElementRef = NewType("ElementRef", int)


class DisjointSet:
    """Registry of named elements partitioned into equivalence classes."""

    def __init__(self) -> None:
        self._refs: dict[str, ElementRef] = {}
        self._names: list[str] = []
        self._parents: list[int] = []
        self._ranks: list[int] = []
        self._roots = 0

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._refs

    def __repr__(self) -> str:
        return f"DisjointSet(elements={len(self)}, classes={self._roots})"

    @property
    def class_count(self) -> int:
        """Number of equivalence classes currently in the forest."""
        return self._roots

    def find_or_create(self, name: str) -> ElementRef:
        """Return the element called ``name``, creating a singleton root if needed."""
        ref = self._refs.get(name)
        if ref is not None:
            return ref

        ref = ElementRef(len(self._names))
        self._names.append(name)
        self._parents.append(ref)
        self._ranks.append(0)
        self._refs[name] = ref
        self._roots += 1
        return ref

    def lookup(self, name: str) -> ElementRef:
        """Return the element called ``name``.

        Raises:
            UnknownElementError: If ``name`` was never passed to ``find_or_create``.
        """
        try:
            return self._refs[name]
        except KeyError:
            raise UnknownElementError(name) from None

    def find_representative(self, element: ElementRef) -> ElementRef:
        """Return the root of the tree containing ``element``."""
        self._check(element)
        parents = self._parents
        current = element
        while parents[current] != current:
            current = parents[current]
        return ElementRef(current)

    def union(self, a: ElementRef, b: ElementRef) -> None:
        """Merge the classes of ``a`` and ``b``.

        The lower-rank root is attached under the higher-rank one. On a tie
        ``a``'s root survives and its rank grows by one.
        """
        a_root = self.find_representative(a)
        b_root = self.find_representative(b)
        if a_root == b_root:
            return

        ranks = self._ranks
        if ranks[a_root] < ranks[b_root]:
            child, root = a_root, b_root
        elif ranks[a_root] > ranks[b_root]:
            child, root = b_root, a_root
        else:
            child, root = b_root, a_root
            ranks[root] += 1

        self._parents[child] = root
        self._roots -= 1
        logger.debug(
            "union_applied",
            child=self._names[child],
            root=self._names[root],
            root_rank=ranks[root],
        )

    def same_class(self, a: ElementRef, b: ElementRef) -> bool:
        """Return True if ``a`` and ``b`` share a representative."""
        return self.find_representative(a) == self.find_representative(b)

    def name_of(self, element: ElementRef) -> str:
        self._check(element)
        return self._names[element]

    def rank_of(self, element: ElementRef) -> int:
        self._check(element)
        return self._ranks[element]

    def is_root(self, element: ElementRef) -> bool:
        self._check(element)
        return self._parents[element] == element

    def classes(self) -> list[frozenset[str]]:
        """Return the current partition, one frozenset of names per class.

        Classes are ordered by the creation order of their first member.
        """
        members: defaultdict[int, set[str]] = defaultdict(set)
        for ref, name in enumerate(self._names):
            members[self.find_representative(ElementRef(ref))].add(name)
        return [frozenset(names) for names in members.values()]

    def _check(self, element: ElementRef) -> None:
        if (
            not isinstance(element, int)
            or isinstance(element, bool)
            or not 0 <= element < len(self._parents)
        ):
            raise UnknownElementError(element)

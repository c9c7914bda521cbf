'''Body catalog for the orrery package
BodyCatalog class definition

A catalog is the validated, immutable set of bodies evaluated together.
It checks the parent hierarchy once, at construction, and precomputes a
parent-first evaluation order so that every parent position is known
before its children are placed.'''

from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from .body import Body
from .utils import validation_error


class CatalogError(ValueError):
    """Raised for an inconsistent body catalog (names, parents, cycles)."""


class BodyCatalog:
    """
    Immutable, validated collection of bodies.

    Parameters
    ----------
    bodies : iterable of Body
        Bodies in authored order. Parents may appear after their children.

    Raises
    ------
    CatalogError
        If names are duplicated, a parent is unknown, or parents form a cycle
        (warnings instead when config.STRICT_VALIDATION is False; offending
        bodies are then treated as orbiting the origin)

    Examples
    --------
    >>> catalog = BodyCatalog([moon, earth, sun])
    >>> [b.name for b in catalog]
    ['Moon', 'Earth', 'Sun']
    >>> [b.name for b in catalog.evaluation_order]
    ['Sun', 'Earth', 'Moon']
    """
    # ========== CONSTRUCTION ==========
    def __init__(self, bodies: Iterable[Body]):
        self._index: Dict[str, int] = {}
        self._bodies: Tuple[Body, ...] = self._unique_bodies(bodies)
        self._parents: Dict[str, Optional[str]] = self._resolve_parents()
        self._children: Dict[Optional[str], List[str]] = {}
        for body in self._bodies:
            self._children.setdefault(self._parents[body.name], []).append(body.name)
        self._order: Tuple[Body, ...] = self._parent_first_order()

    # ========== VALIDATION ==========
    def _unique_bodies(self, bodies) -> Tuple[Body, ...]:
        """Identifiers must be unique within a catalog, later duplicates are dropped"""
        unique = []
        for body in bodies:
            if not isinstance(body, Body):
                raise TypeError(f"BodyCatalog accepts Body objects, got {type(body)}")
            if body.name in self._index:
                validation_error(f"Duplicate body name '{body.name}'", CatalogError)
                continue
            self._index[body.name] = len(unique)
            unique.append(body)
        return tuple(unique)

    def _resolve_parents(self) -> Dict[str, Optional[str]]:
        """Map each body to its parent, rejecting unknown parents and cycles"""
        parents = {}
        for body in self._bodies:
            parent = body.parent
            if parent is not None and parent not in self._index:
                validation_error(
                    f"Body '{body.name}' orbits unknown parent '{parent}'",
                    CatalogError)
                parent = None
            parents[body.name] = parent

        for name in list(parents):
            seen = [name]
            current = parents[name]
            while current is not None:
                if current in seen:
                    cycle = " -> ".join(seen[seen.index(current):] + [current])
                    validation_error(f"Parent cycle detected: {cycle}", CatalogError)
                    # break the cycle at the body that closes it
                    parents[seen[-1]] = None
                    break
                seen.append(current)
                current = parents[current]
        return parents

    def _parent_first_order(self) -> Tuple[Body, ...]:
        """Depth-first traversal from the roots, children in authored order"""
        order = []
        stack = list(reversed(self._children.get(None, [])))
        while stack:
            name = stack.pop()
            order.append(self._bodies[self._index[name]])
            stack.extend(reversed(self._children.get(name, [])))
        return tuple(order)

    # ========== FACTORY METHODS ==========
    @classmethod
    def from_records(cls, records: Iterable[dict], validate: bool = True) -> "BodyCatalog":
        """
        Create a catalog from plain mappings, see Body.from_dict().

        Examples
        --------
        >>> BodyCatalog.from_records([
        ...     {'name': 'Sun', 'isLightSource': True, 'color': '#ffcc33'},
        ...     {'name': 'Earth', 'orbit': {'semiMajorAxis': 1.0,
        ...      'eccentricity': 0.0167, 'parent': 'Sun'}},
        ... ])
        """
        return cls(Body.from_dict(record, validate=validate) for record in records)

    @classmethod
    def from_dataframe(cls, df, validate: bool = True) -> "BodyCatalog":
        """
        Create a catalog from a pandas DataFrame with one row per body.

        Columns follow Body.from_dict(); orbital element columns are read
        directly from the row. Missing (NaN) cells are ignored, so rows of
        stationary bodies may leave the element columns empty.
        """
        import pandas as pd

        records = []
        for _, row in df.iterrows():
            records.append({key: value for key, value in row.items()
                            if not (pd.api.types.is_scalar(value) and pd.isna(value))})
        return cls.from_records(records, validate=validate)

    # ========== PROPERTY ACCESS ==========
    @property
    def bodies(self) -> Tuple[Body, ...]:
        """Bodies in authored order"""
        return self._bodies

    @property
    def evaluation_order(self) -> Tuple[Body, ...]:
        """Bodies ordered so that every parent precedes its children"""
        return self._order

    @property
    def names(self) -> List[str]:
        return [body.name for body in self._bodies]

    @property
    def roots(self) -> List[Body]:
        """Bodies placed relative to the origin"""
        return [self[name] for name in self._children.get(None, [])]

    # ========== HIERARCHY ==========
    def parent_of(self, name: str) -> Optional[str]:
        """Resolved parent name, None when the body is placed about the origin"""
        return self._parents[self[name].name]

    def children(self, name: str) -> List[Body]:
        """Direct children of a body, in authored order"""
        return [self[child] for child in self._children.get(self[name].name, [])]

    def ancestors(self, name: str) -> List[Body]:
        """Chain of parents from the direct parent up to the root"""
        chain = []
        current = self.parent_of(name)
        while current is not None:
            chain.append(self[current])
            current = self._parents[current]
        return chain

    def focusable_names(self) -> List[str]:
        """Names of bodies a camera may target, in authored order"""
        return [body.name for body in self._bodies if body.focusable]

    def light_sources(self) -> List[Body]:
        return [body for body in self._bodies if body.is_light_source]

    # ========== SPECIAL METHODS ==========
    def __len__(self):
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies)

    def __contains__(self, name):
        return name in self._index

    def __getitem__(self, name: str) -> Body:
        try:
            return self._bodies[self._index[name]]
        except KeyError:
            raise KeyError(f"No body named '{name}' in catalog") from None

    def __repr__(self):
        return f"BodyCatalog({self.names})"

    def __str__(self):
        lines = [f"BodyCatalog with {len(self)} bodies:"]

        def describe(name, depth):
            lines.append("  " * (depth + 1) + str(self[name]))
            for child in self._children.get(name, []):
                describe(child, depth + 1)

        for root in self._children.get(None, []):
            describe(root, 0)
        return "\n".join(lines)

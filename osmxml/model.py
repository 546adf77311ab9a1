# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Dict, Iterator, List, Literal, Mapping, Optional, Tuple, Union

from typing_extensions import Self

Position = Tuple[float, float]
"""Position describes the physical location of a node, in WGS84 degrees:
first latitude, then longitude.
"""

ElementKind = Literal["node", "way", "relation"]
"""ElementKind names one of the three OpenStreetMap element types."""

ELEMENT_KINDS: Tuple[ElementKind, ...] = ("node", "way", "relation")

ElementKey = Tuple[ElementKind, int]
"""ElementKey identifies an element in a :py:class:`Document`. OpenStreetMap
ids are only unique within a single element kind, so the kind is part of the key.
"""

Tags = Dict[str, str]


@dataclass
class Node:
    """Node represents a single `OpenStreetMap node <https://wiki.openstreetmap.org/wiki/Node>`_."""

    kind: ClassVar[ElementKind] = "node"

    id: int
    lat: float
    lon: float
    visible: bool = True
    tags: Tags = field(default_factory=dict)

    @property
    def position(self) -> Position:
        return self.lat, self.lon


@dataclass
class Way:
    """Way represents a single `OpenStreetMap way <https://wiki.openstreetmap.org/wiki/Way>`_."""

    kind: ClassVar[ElementKind] = "way"

    id: int
    nodes: List[int] = field(default_factory=list)
    tags: Tags = field(default_factory=dict)

    def is_closed(self) -> bool:
        return bool(self.nodes) and self.nodes[0] == self.nodes[-1]


@dataclass
class RelationMember:
    """RelationMember represents a single member of a
    `OpenStreetMap relation <https://wiki.openstreetmap.org/wiki/Relation>`_.

    ``type`` is None if the source document didn't state the kind of the referenced element.
    """

    ref: int
    type: Optional[ElementKind] = None
    role: str = ""


@dataclass
class Relation:
    """Relation represents a single `OpenStreetMap relation <https://wiki.openstreetmap.org/wiki/Relation>`_."""

    kind: ClassVar[ElementKind] = "relation"

    id: int
    members: List[RelationMember] = field(default_factory=list)
    tags: Tags = field(default_factory=dict)


Element = Union[Node, Way, Relation]
"""Element represents a single `OpenStreetMap element <https://wiki.openstreetmap.org/wiki/Elements>`_:
a :py:class:`Node`, :py:class:`Way` or :py:class:`Relation`.
"""


@dataclass(frozen=True, eq=False)
class Document(Mapping[ElementKey, Element]):
    """Document is the read-only result of decoding a whole OSM XML file.

    As a :py:class:`~collections.abc.Mapping`, it is keyed by ``(kind, id)`` pairs,
    e.g. ``doc["way", 42]``. Elements of a single kind can be looked up by their plain
    integer id through :py:attr:`nodes`, :py:attr:`ways` and :py:attr:`relations`.

    Iteration yields keys of all nodes, then all ways, then all relations,
    each group in document order.
    """

    nodes: Mapping[int, Node] = field(default_factory=lambda: MappingProxyType({}))
    ways: Mapping[int, Way] = field(default_factory=lambda: MappingProxyType({}))
    relations: Mapping[int, Relation] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dicts(
        cls,
        nodes: Dict[int, Node],
        ways: Dict[int, Way],
        relations: Dict[int, Relation],
    ) -> Self:
        """Wraps the provided dictionaries in read-only views.
        The caller must not modify the dictionaries afterwards."""
        return cls(MappingProxyType(nodes), MappingProxyType(ways), MappingProxyType(relations))

    def by_kind(self, kind: ElementKind) -> Mapping[int, Element]:
        """Returns the per-kind view of elements with the provided kind."""
        if kind == "node":
            return self.nodes
        elif kind == "way":
            return self.ways
        elif kind == "relation":
            return self.relations
        raise KeyError(kind)

    def __getitem__(self, key: ElementKey) -> Element:
        if not isinstance(key, tuple) or len(key) != 2:
            raise KeyError(key)
        kind, id = key
        return self.by_kind(kind)[id]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        kind, id = key
        return kind in ELEMENT_KINDS and id in self.by_kind(kind)

    def __iter__(self) -> Iterator[ElementKey]:
        for kind in ELEMENT_KINDS:
            for id in self.by_kind(kind):
                yield kind, id

    def __len__(self) -> int:
        return len(self.nodes) + len(self.ways) + len(self.relations)

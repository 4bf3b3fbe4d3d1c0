"""
Data models for the assembled tree graph
"""

from dataclasses import asdict, dataclass, field


@dataclass
class GraphNode:
    """A person as seen in the tree graph"""
    id: str
    first_name: str
    last_name: str
    birth_date: str | None = None
    death_date: str | None = None
    is_male: bool = False


@dataclass
class GraphEdge:
    """A directed parent -> child link"""
    parent_id: str
    child_id: str
    relationship_type: str


@dataclass
class TreeGraph:
    """Nodes and edges of one tree"""
    tree_id: str
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'tree_id': self.tree_id,
            'nodes': [asdict(node) for node in self.nodes],
            'edges': [asdict(edge) for edge in self.edges],
        }

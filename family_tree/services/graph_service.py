"""
Service assembling one tree into a node/edge graph
"""

from family_tree.database.models import Person, Relationship
from family_tree.repositories.person_repository import PersonRepository
from family_tree.repositories.relationship_repository import RelationshipRepository
from family_tree.repositories.tree_repository import TreeRepository
from family_tree.services.base_service import BaseService
from family_tree.services.exceptions import TreeNotFoundError, handle_service_exceptions
from family_tree.shared.date_utils import LifeDateParser
from family_tree.shared.graph_models import GraphEdge, GraphNode, TreeGraph
from family_tree.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)


class GraphService(BaseService):
    """Read-only graph assembly; stored data is returned as is"""

    def __init__(self, db_session=None):
        super().__init__(db_session)
        self.tree_repository = TreeRepository(self.db_session)
        self.person_repository = PersonRepository(self.db_session)
        self.relationship_repository = RelationshipRepository(self.db_session)

    @handle_service_exceptions(logger)
    def build_graph(self, tree_id) -> TreeGraph:
        """
        Build the graph of a tree

        Nodes are every person of the tree ordered by birth date (undated
        persons last); edges are every relationship whose parent is in the
        tree.

        Raises:
            TreeNotFoundError: when the tree does not exist
        """
        tree = self.tree_repository.get_by_id(tree_id)
        if tree is None:
            raise TreeNotFoundError(f"Tree not found: {tree_id}")

        persons = self.person_repository.list_by_birth_date(tree.id)
        relationships = self.relationship_repository.list_by_tree(tree.id)

        graph = TreeGraph(
            tree_id=str(tree.id),
            nodes=[self._to_node(person) for person in persons],
            edges=[self._to_edge(relationship) for relationship in relationships],
        )
        logger.debug(f"Built graph for tree {tree.id}: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
        return graph

    @staticmethod
    def _to_node(person: Person) -> GraphNode:
        return GraphNode(
            id=str(person.id),
            first_name=person.first_name,
            last_name=person.last_name,
            birth_date=LifeDateParser.format(person.birth_date),
            death_date=LifeDateParser.format(person.death_date),
            is_male=bool(person.is_male),
        )

    @staticmethod
    def _to_edge(relationship: Relationship) -> GraphEdge:
        return GraphEdge(
            parent_id=str(relationship.parent_id),
            child_id=str(relationship.child_id),
            relationship_type=relationship.relationship_type,
        )

"""
Tests for tree graph assembly
"""

import uuid
from datetime import date

import pytest

from family_tree.services.exceptions import TreeNotFoundError
from family_tree.shared.graph_models import GraphEdge, GraphNode, TreeGraph


class TestGraphService:
    """Test node/edge assembly of one tree"""

    def test_empty_tree(self, services, tree):
        graph = services.graph_service.build_graph(tree.id)

        assert graph.tree_id == str(tree.id)
        assert graph.nodes == []
        assert graph.edges == []

    def test_missing_tree(self, services, db):
        with pytest.raises(TreeNotFoundError):
            services.graph_service.build_graph(uuid.uuid4())

    def test_nodes_ordered_by_birth_date_undated_last(self, services, tree, make_person):
        undated = make_person('Undated')
        young = make_person('Young', date(2000, 1, 1))
        old = make_person('Old', date(1900, 1, 1))

        graph = services.graph_service.build_graph(tree.id)

        assert [node.id for node in graph.nodes] == [str(old.id), str(young.id), str(undated.id)]

    def test_node_fields(self, services, tree, make_person):
        person = make_person('Ada', date(1815, 12, 10), is_male=False, last_name='Lovelace')

        node = services.graph_service.build_graph(tree.id).nodes[0]

        assert node == GraphNode(
            id=str(person.id),
            first_name='Ada',
            last_name='Lovelace',
            birth_date='1815-12-10',
            death_date=None,
            is_male=False,
        )

    def test_edges_carry_type(self, services, tree, family):
        services.relationship_service.link_existing_child(family['father'].id, family['child'].id, 'biological')
        services.relationship_service.link_existing_child(family['mother'].id, family['child'].id, 'not_biological')

        graph = services.graph_service.build_graph(tree.id)

        assert sorted((e.parent_id, e.relationship_type) for e in graph.edges) == sorted([
            (str(family['father'].id), 'biological'),
            (str(family['mother'].id), 'not_biological'),
        ])

    def test_other_trees_not_included(self, services, user, tree, family, make_person):
        other_tree = services.tree_service.create_tree(user.id, 'Other family')
        parent = make_person('Elsewhere', date(1900, 1, 1), is_male=True, tree_id=other_tree.id)
        child = make_person('Elsewhere child', date(1930, 1, 1), tree_id=other_tree.id)
        services.relationship_service.link_existing_child(parent.id, child.id, 'biological')

        graph = services.graph_service.build_graph(tree.id)

        assert len(graph.nodes) == 3
        assert graph.edges == []

    def test_deleted_person_takes_edges_along(self, services, tree, family):
        services.relationship_service.link_existing_child(family['father'].id, family['child'].id, 'biological')
        services.person_service.delete_person(family['father'].id)

        graph = services.graph_service.build_graph(tree.id)

        assert len(graph.nodes) == 2
        assert graph.edges == []


class TestTreeGraph:
    """Test graph serialization"""

    def test_to_dict(self):
        graph = TreeGraph(
            tree_id='t1',
            nodes=[GraphNode(id='p1', first_name='A', last_name='B', birth_date='1950-01-01', is_male=True)],
            edges=[GraphEdge(parent_id='p1', child_id='p2', relationship_type='biological')],
        )

        assert graph.to_dict() == {
            'tree_id': 't1',
            'nodes': [{
                'id': 'p1',
                'first_name': 'A',
                'last_name': 'B',
                'birth_date': '1950-01-01',
                'death_date': None,
                'is_male': True,
            }],
            'edges': [{'parent_id': 'p1', 'child_id': 'p2', 'relationship_type': 'biological'}],
        }

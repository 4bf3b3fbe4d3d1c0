"""
Tree API blueprint: tree CRUD and the assembled graph
"""

from flask import Blueprint, g

from family_tree.blueprints.blueprint_utils import get_json_body, get_services, login_required, owned_tree
from family_tree.shared.api_response_formatter import APIResponseFormatter


api_trees = Blueprint('api_trees', __name__, url_prefix='/api/trees')


@api_trees.route('', methods=['GET'])
@login_required
def list_trees():
    """Trees of the current user"""
    trees = get_services().tree_service.list_trees(g.user_id)
    return APIResponseFormatter.list_response('trees', trees, APIResponseFormatter.format_tree)


@api_trees.route('', methods=['POST'])
@login_required
def create_tree():
    data = get_json_body()
    tree = get_services().tree_service.create_tree(g.user_id, data.get('name'))
    return APIResponseFormatter.success(
        {'tree': APIResponseFormatter.format_tree(tree)},
        message='Tree created',
        status_code=201
    )


@api_trees.route('/<tree_id>', methods=['GET'])
@login_required
def get_tree(tree_id):
    tree = owned_tree(tree_id)
    return APIResponseFormatter.success({'tree': APIResponseFormatter.format_tree(tree)})


@api_trees.route('/<tree_id>', methods=['PUT'])
@login_required
def update_tree(tree_id):
    data = get_json_body()
    tree = owned_tree(tree_id)
    tree = get_services().tree_service.update_tree(tree.id, data.get('name'))
    return APIResponseFormatter.success(
        {'tree': APIResponseFormatter.format_tree(tree)},
        message='Tree updated'
    )


@api_trees.route('/<tree_id>', methods=['DELETE'])
@login_required
def delete_tree(tree_id):
    tree = owned_tree(tree_id)
    get_services().tree_service.delete_tree(tree.id)
    return APIResponseFormatter.success(message='Tree deleted')


@api_trees.route('/<tree_id>/graph', methods=['GET'])
@login_required
def get_tree_graph(tree_id):
    """All persons of the tree as nodes and all parent -> child links as edges"""
    tree = owned_tree(tree_id)
    graph = get_services().graph_service.build_graph(tree.id)
    return APIResponseFormatter.success(graph.to_dict())

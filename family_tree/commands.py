"""
Flask CLI commands for the family tree API
"""

import json

import click
from flask import current_app

from family_tree.database import init_db
from family_tree.services.exceptions import ServiceError


def register_commands(app):
    """Register all CLI commands with the Flask app"""

    @app.cli.command('init-db')
    def init_db_command():
        """Create all database tables."""
        init_db()
        click.echo("Database tables created")

    @app.cli.command('tree-graph')
    @click.argument('tree_id')
    @click.option('--indent', default=2, show_default=True, help='JSON indentation')
    def tree_graph(tree_id, indent):
        """Print the node/edge graph of a tree as JSON."""
        graph_service = current_app.extensions['family_tree_services'].graph_service
        try:
            graph = graph_service.build_graph(tree_id)
        except ServiceError as e:
            raise click.ClickException(str(e)) from e

        click.echo(json.dumps(graph.to_dict(), indent=indent))

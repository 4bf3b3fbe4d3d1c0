"""
Per-application service wiring
"""

from family_tree.services.auth_service import AuthService
from family_tree.services.graph_service import GraphService
from family_tree.services.person_service import PersonService
from family_tree.services.relationship_service import RelationshipService
from family_tree.services.tree_service import TreeService


class ServiceContainer:
    """Holds one instance of every service, built from the app config"""

    def __init__(self, config, db_session=None):
        self.auth_service = AuthService(
            secret_key=config.jwt_secret_key,
            token_ttl_hours=config.token_ttl_hours,
            db_session=db_session
        )
        self.tree_service = TreeService(db_session)
        self.person_service = PersonService(db_session)
        self.relationship_service = RelationshipService(db_session, person_service=self.person_service)
        self.graph_service = GraphService(db_session)

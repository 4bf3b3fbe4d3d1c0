"""
Service layer: validation and orchestration on top of the repositories
"""

from .container import ServiceContainer


__all__ = ['ServiceContainer']

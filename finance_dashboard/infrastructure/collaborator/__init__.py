"""Collaborator REST API infrastructure package."""

from .collaborator_client import CollaboratorClient

__all__ = ["CollaboratorClient"]

"""Collaborator protocols consumed by the capability."""

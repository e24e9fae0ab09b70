"""Application factories."""

from cookmeet.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]

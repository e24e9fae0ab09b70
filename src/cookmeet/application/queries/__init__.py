"""Queries: read-side use-cases."""

from cookmeet.application.queries.cuisine import GetCuisineQuery, ListCuisinesQuery

__all__ = ["GetCuisineQuery", "ListCuisinesQuery"]

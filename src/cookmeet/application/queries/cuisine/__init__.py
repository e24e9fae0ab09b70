"""Cuisine queries."""

from cookmeet.application.queries.cuisine.get_cuisine_query import GetCuisineQuery
from cookmeet.application.queries.cuisine.list_cuisines_query import ListCuisinesQuery

__all__ = ["GetCuisineQuery", "ListCuisinesQuery"]

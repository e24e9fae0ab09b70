"""HTTP API for CookMeet."""

"""CookMeet recipe-bookmarking backend."""

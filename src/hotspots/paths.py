"""
Store paths for users, movies and hotspots
"""

from .store.base import join_path

USERS = "users"
MOVIES = "movies"
HOTSPOTS = "hotspots"
EDITED_MOVIES = "editedMovies"


def user_path(uid: str) -> str:
    return join_path(USERS, uid)


def edited_movies_path(uid: str) -> str:
    return join_path(USERS, uid, EDITED_MOVIES)


def movie_path(movie_id: str) -> str:
    return join_path(MOVIES, movie_id)


def hotspot_path(movie_id: str, hotspot_id: str) -> str:
    return join_path(MOVIES, movie_id, HOTSPOTS, hotspot_id)

"""BookStack API resource modules."""

from bookstack_api.resources.books import BooksResource
from bookstack_api.resources.users import UsersResource

__all__ = [
    "BooksResource",
    "UsersResource",
]

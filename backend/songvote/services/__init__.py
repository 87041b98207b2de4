"""Services module for business logic and data operations.

Services own data access for their tables; API routes only translate
requests into service calls.
"""

from songvote.services.item_service import ItemService
from songvote.services.rating_store import RatingStore

__all__ = [
    "ItemService",
    "RatingStore",
]

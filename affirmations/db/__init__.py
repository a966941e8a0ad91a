from .base import Base
from .models import collection, affirmation

__all__ = ["Base", "collection", "affirmation"]

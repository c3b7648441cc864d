"""Services - use cases over the rating store."""

from ratings_spine.services.ratings import RatingService

__all__ = ["RatingService"]

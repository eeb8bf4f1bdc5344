from app.models.interview import Interview

__all__ = [
    "Interview",
]

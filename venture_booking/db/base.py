"""SQLAlchemy Base class for all models."""
from venture_booking.models.base.base_model import Base


def import_models() -> None:
    """Import all models so they are registered with Base.metadata."""
    import venture_booking.models  # noqa: F401


__all__ = ["Base", "import_models"]

"""Categories module - shared taxonomy for posts and trainings."""

from sharehub.modules.categories.routes import router


__all__ = ["router"]

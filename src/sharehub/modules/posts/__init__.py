"""Posts module - uploaded images and documents."""

from sharehub.modules.posts.routes import router


__all__ = ["router"]

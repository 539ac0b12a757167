"""Storage module - bucket listing for administrators."""

from sharehub.modules.storage.routes import router


__all__ = ["router"]

"""Feature modules with auto-discovery."""

import logging
from importlib import import_module
from pathlib import Path

from fastapi import APIRouter


logger = logging.getLogger(__name__)


def _module_dirs() -> list[Path]:
    modules_dir = Path(__file__).parent
    return [
        path
        for path in sorted(modules_dir.iterdir())
        if path.is_dir() and not path.name.startswith("_")
    ]


def discover_modules() -> list[APIRouter]:
    """Auto-discover and return routers from all modules.

    This function scans the modules directory for subdirectories
    that contain a router attribute in their __init__.py.

    Returns:
        List of FastAPI routers from discovered modules.
    """
    routers: list[APIRouter] = []

    for path in _module_dirs():
        try:
            module = import_module(f"sharehub.modules.{path.name}")
            if hasattr(module, "router"):
                routers.append(module.router)
                logger.info(f"Loaded module: {path.name}")
        except ImportError as e:
            logger.warning(f"Failed to load module {path.name}: {e}")

    return routers


def load_models() -> None:
    """Import every module's ``models`` so the ORM metadata is complete."""
    for path in _module_dirs():
        if (path / "models.py").exists():
            import_module(f"sharehub.modules.{path.name}.models")

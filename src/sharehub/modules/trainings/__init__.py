"""Trainings module - training materials with attached links."""

from sharehub.modules.trainings.routes import router


__all__ = ["router"]

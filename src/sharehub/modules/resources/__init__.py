"""Shared machinery for posts and trainings.

Models, repositories, the access dependency and the router factory live
here; the ``posts`` and ``trainings`` modules mount the routers.
"""

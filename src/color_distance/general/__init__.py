"""
general.
========

Does: Group project-wide helpers (packaged data tables, topic logging) that are not
      specific to any color algorithm.
"""

__all__: list[str] = []
__docformat__ = "google"

"""Top-level package for the Travel Timeline project.

Travel entries are recorded by the user and grouped into journeys:
runs of trips that end with a return home. The timeline core lives
in ``travel_timeline.timeline``; storage backends, the clock and the
renderer are injected through the ports in ``travel_timeline.ports``.
"""

from .timeline import effective_exit_date, group_into_journeys

__all__ = ["effective_exit_date", "group_into_journeys"]

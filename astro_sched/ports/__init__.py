"""Ports the schedule manager talks through."""

from astro_sched.ports.notifications import CallableObserver, ConflictObserver

__all__ = ["CallableObserver", "ConflictObserver"]

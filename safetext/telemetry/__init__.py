"""Run logging for CLI-observable normalization stages."""

from .logger import RunLogger

__all__ = ["RunLogger"]

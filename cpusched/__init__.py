"""CPU scheduling simulator with SJF, RR-priority, MLFQ and aging schedulers."""

__version__ = "0.1.0"
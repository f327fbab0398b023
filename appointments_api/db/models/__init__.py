# Models package (re-export table models for stable imports)
from .appointment import Appointment

__all__ = [
    "Appointment",
]

"""Classic operating-system algorithms: paging, disk, CPU and real-time scheduling, allocation and deadlock avoidance."""

__version__ = "0.1.0"

__all__ = [
    "allocation",
    "banker",
    "cpu",
    "disk",
    "paging",
    "processes",
    "realtime",
]
"""dndtracker: combat and encounter engine for tabletop session tracking."""

__version__ = "0.1.0"

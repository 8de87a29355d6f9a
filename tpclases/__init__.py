"""Object-oriented exercises: clock, course roster, arithmetic and bank accounts."""

__version__ = "0.1.0"
__all__ = ["clock", "course", "arithmetic", "bank"]
from .writer import Writer

# Public port exports keep wiring explicit at composition time.
__all__ = ["Writer"]

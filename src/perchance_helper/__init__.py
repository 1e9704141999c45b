"""perchance-helper — author and test Perchance-style generator templates."""

__version__ = "0.1.0"

"""Game logic for RefPrism: steer a crystal that reflects and refracts a laser."""

__version__ = "1.0.0"
# Pick-bot: four reply options per turn, the user picks one.

__version__ = "0.1.0"

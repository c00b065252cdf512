"""Championship — double round-robin scheduling and standings for a football league."""

__version__ = "0.1.0"

"""vecmin — minimum of a collection, with a fault-tolerant number reader."""

__version__ = "0.1.0"

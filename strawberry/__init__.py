"""Core utilities: maths types, buffers, codecs, logging, messaging, timing, synchronisation and processes."""

__version__ = "0.1.0"
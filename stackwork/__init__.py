"""Stack-based algorithms for brackets, expressions, histograms, intervals and collisions."""

__version__ = "0.1.0"
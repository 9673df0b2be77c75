"""FHEVM Example Hub: catalog, scaffolder and doc generator for FHEVM examples."""

__version__ = "0.1.0"

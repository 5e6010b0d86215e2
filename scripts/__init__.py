"""Command line harnesses for the MRG32k3a generator."""

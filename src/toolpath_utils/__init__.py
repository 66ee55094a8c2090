"""Utilities for sequencing and trimming tool paths planned over 3D surfaces."""

"""Lanes and road markings."""

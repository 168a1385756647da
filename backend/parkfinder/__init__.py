"""Parking Finder backend."""

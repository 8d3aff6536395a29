"""Bono Navideño 5K registration and benefits-tracking service."""

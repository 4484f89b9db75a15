"""
Geometry helpers shared by hit-testing, attacks and interactions.
"""

"""
Systems layer: entity management, resources, combat, world step and rounds.
"""

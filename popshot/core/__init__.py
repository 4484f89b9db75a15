"""
Core layer: logging, errors, configuration, events and runtime state.
"""

"""Domain layer: entities and ports (protocols).

Pure business types with no framework dependencies.
"""

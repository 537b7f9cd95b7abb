"""Domain layer: genealogy entities, enums, value objects, and exceptions.

No framework or persistence imports.
"""

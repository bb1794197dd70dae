"""Domain layer - path resolution and route enumeration model.

This layer contains the entities, value objects and protocols (ports) the
resolver and routes feed are written against, plus the pure path
normalizer. It has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Read models supplied by content collaborators
- value_objects/: Immutable values (config snapshot, keys, cursors, results)
- protocols/: Ports for every external collaborator
- enums/: Resolution kinds, langcode fallback policy, cursor segments
- errors/: Domain errors returned in Result types
"""

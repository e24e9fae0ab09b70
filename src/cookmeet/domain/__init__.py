"""Domain layer: entities, validators and repository interfaces."""

"""Domain layer: models, errors and code generation."""

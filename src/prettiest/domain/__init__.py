"""Domain layer: value objects, exceptions, ports."""

"""Application layer: position arithmetic, inspectors, rule engine, reporters."""

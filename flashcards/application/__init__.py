"""Application layer: orchestration around domain objects."""

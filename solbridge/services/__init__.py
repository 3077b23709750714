"""Service Layer: orchestrates core validation with the instruction builder."""

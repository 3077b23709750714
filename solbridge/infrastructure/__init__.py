"""Infrastructure Layer: logging setup and the SDK-backed instruction builder."""

"""SolBridge Application Package: Solana keypair, signing and instruction-building API.

Invariants:
    - Package root carries only the version string (import side-effects prohibited)
"""

__version__ = "1.0.0"

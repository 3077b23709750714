"""API Dependencies: FastAPI providers for shell-side collaborators.

Invariants:
    - get_instruction_builder returns one stateless builder per process
    - Tests replace it through app.dependency_overrides
"""

from functools import lru_cache

from solbridge.core.instruction_protocols import InstructionBuilder
from solbridge.infrastructure.spl_instruction_builder import SplInstructionBuilder


@lru_cache
def get_instruction_builder() -> InstructionBuilder:
    return SplInstructionBuilder()

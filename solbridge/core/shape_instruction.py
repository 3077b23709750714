"""Instruction Shaping: flatten library Instruction objects into JSON-friendly values.

Invariants:
    - Account order is preserved exactly as the library produced it
    - instruction_data is the library's opaque bytes, base64-encoded, never inspected
"""

from solders.instruction import Instruction

from solbridge.core.codec import b58encode, b64encode
from solbridge.core.domain_types import AccountView, ShapedInstruction


def shape_instruction(instruction: Instruction) -> ShapedInstruction:
    return ShapedInstruction(
        program_id=b58encode(bytes(instruction.program_id)),
        accounts=tuple(
            AccountView(
                pubkey=b58encode(bytes(meta.pubkey)),
                is_signer=meta.is_signer,
                is_writable=meta.is_writable,
            )
            for meta in instruction.accounts
        ),
        instruction_data=b64encode(bytes(instruction.data)),
    )

"""
Module 03 - Contract Verification Adapter
Bridges raw proofs to an on-chain MerkleProof-style verifier.

The contract method is any callable taking (proof_hex, root_hex, element_hex)
where proof_hex is the concatenation of 32-byte siblings. The adapter only
re-encodes values; whatever the callee returns is passed straight back.
"""
from __future__ import annotations

from typing import Any, Callable, Sequence

from merkle_commit.merkle.encoding import decode_element, encode_element, encode_proof


ContractMethod = Callable[[str, str, str], Any]


def contract_call_args(
    proof: Sequence[bytes],
    root: bytes,
    element: bytes,
) -> tuple[str, str, str]:
    """
    Encode a proof, root and element for a contract call.

    Returns:
        (packed proof hex, root hex, element hex), all 0x-prefixed

    Raises:
        InvalidElementError: If any value is not 32 bytes
    """
    return (
        encode_proof(proof),
        encode_element(decode_element(root)),
        encode_element(decode_element(element)),
    )


def check_proof_contract_factory(contract_method: ContractMethod) -> Callable[..., Any]:
    """
    Wrap a contract verification method so it accepts raw bytes.

    Example:
        >>> check = check_proof_contract_factory(contract.functions.checkProof)
        >>> check(tree.get_proof(e), tree.root, e)
    """
    def check_proof(proof: Sequence[bytes], root: bytes, element: bytes) -> Any:
        return contract_method(*contract_call_args(proof, root, element))

    return check_proof


__all__ = [
    "ContractMethod",
    "contract_call_args",
    "check_proof_contract_factory",
]

from __future__ import annotations
import hashlib

class RngManager:
    """
    Single source of truth for randomness in an inference call.
    Creates named, order-independent child seeds by hashing:
      child_seed(name)          -> stable int seed
      member_seeds(m)           -> one seed per ensemble member
    A member's draws therefore depend only on (root seed, member index),
    never on worker count or the order in which members finish.
    """
    def __init__(self, seed: int | None):
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    def _mix(self, name: str) -> int:
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # 32 bits: valid for both numpy SeedSequence and legacy uint32 seeds
        return int.from_bytes(h[:4], "little", signed=False)

    def child_seed(self, name: str) -> int:
        return self._mix(name)

    def member_seeds(self, m: int, base_name: str = "ensemble/member") -> list[int]:
        return [self.child_seed(f"{base_name}_{k}") for k in range(m)]

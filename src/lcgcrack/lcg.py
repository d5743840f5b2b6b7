from dataclasses import dataclass
from typing import Iterator, List, Optional

from .modmath import normalized_mod, modular_inverse

@dataclass
class LCG:
    """
    state_{n+1} = (a * state_n + c) mod m, on exact ints.

    0 <= state < m holds after construction and after every step.
    Fields are only checked in __init__; assigning state or m directly
    afterwards bypasses that check.
    Two generators compare equal when state, a, c and m all match.
    """
    state: int
    a: int   # multiplier
    c: int   # increment
    m: int   # modulus

    def __post_init__(self) -> None:
        if self.m <= 0:
            raise ValueError("modulus must be positive")
        if not 0 <= self.state < self.m:
            raise ValueError("state must lie in [0, m)")

    def advance(self) -> int:
        self.state = normalized_mod(self.state * self.a + self.c, self.m)
        return self.state

    def retreat(self) -> Optional[int]:
        """
        Step back one state: inv(a) * (state - c) mod m.
        Returns None, leaving the state alone, when a has no inverse mod m.
        """
        inv_a = modular_inverse(self.a, self.m)
        if inv_a is None:
            return None
        self.state = normalized_mod(inv_a * (self.state - self.c), self.m)
        return self.state

    def take(self, n: int) -> List[int]:
        return [self.advance() for _ in range(n)]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.advance()

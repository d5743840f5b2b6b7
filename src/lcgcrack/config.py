from dataclasses import dataclass

# Recovery reads v[0], v[1] and v[2].
MIN_SAMPLES = 3

@dataclass(frozen=True)
class CrackFlags:
    # Anything below MIN_SAMPLES is raised to MIN_SAMPLES.
    min_samples: int = MIN_SAMPLES
    # Replay the candidate over the observed values and reject mismatches.
    verify: bool = False

    def __post_init__(self) -> None:
        if self.min_samples < MIN_SAMPLES:
            object.__setattr__(self, "min_samples", MIN_SAMPLES)

# Global flags (can be swapped by the embedding application)
FLAGS = CrackFlags()

import dataclasses
import os

DEFAULT_DFT_THRESHOLD = 8

def env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)

    if value is None:
        return default

    return value.strip().lower() in ("1", "true", "yes", "on")

@dataclasses.dataclass
class PlannerConfig:
    """
    Options that control how FFTPlanner builds an algorithm tree.

    Attributes:
        dft_threshold (`int`): Lengths up to this size (that are not powers of two)
            are computed with the naive DFT instead of being decomposed further.
        use_good_thomas (`bool`): Split lengths with several distinct prime factors with the
            Good-Thomas algorithm. When False the twiddle-factor mixed radix algorithm is used instead.
    """
    dft_threshold: int = DEFAULT_DFT_THRESHOLD
    use_good_thomas: bool = True

    def __post_init__(self):
        assert self.dft_threshold >= 1, "DFT threshold must be at least 1"

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """
        Build a config from the PFAFFT_DFT_THRESHOLD and PFAFFT_USE_GOOD_THOMAS environment
        variables, falling back to the defaults for anything unset.
        """
        return cls(
            dft_threshold=int(os.environ.get("PFAFFT_DFT_THRESHOLD", DEFAULT_DFT_THRESHOLD)),
            use_good_thomas=env_flag("PFAFFT_USE_GOOD_THOMAS", True),
        )

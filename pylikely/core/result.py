"""
Generic result container for pylikely batch computations.

The Result class is the envelope that batch operations (such as drawing
many correlated parameter vectors from a fitted minimum) return. It keeps
timing and run metadata next to the domain payload, while each domain
defines its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (counts, seeds, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for batch computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (draws, weights, etc.)
        info: Structured metadata (counts, seed, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SampleParams(draws=draws, weights=weights),
        ...     info={'n_draws': 1000, 'n_parameters': 3, 'seed': 42},
        ...     timing={'total_seconds': 0.01, 'draws': 0.009},
        ...     backend_name='cpu_cholesky',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

"""
Pseudo-random number source.

RandomSource bundles three independent numpy generators:

    - the shared stream (Mersenne twister, MT19937) behind get_uniform and
      get_normal, which is what correlated parameter draws consume;
    - a fast single-precision stream (SFC64) behind get_fast_uniform;
    - throwaway seed-selected generators behind fill_array_uniform and
      fill_array_normal, so bulk fills are a pure function of (seed, size)
      and never advance or depend on the shared stream.

One process-wide instance is available through RandomSource.instance();
it is created lazily with OS entropy unless set_seed() is called on it.
Further instances can be constructed freely when isolation is needed.

None of this is thread-safe. Callers sharing an instance across threads
must serialise access themselves.
"""

from __future__ import annotations

from typing import Any, ClassVar

import numpy as np
from numpy.typing import NDArray

from pylikely.core.exceptions import ValidationError
from pylikely.core.validation import check_non_negative_int
from pylikely.random.aligned import ALIGNMENT_BYTES, is_aligned

_SEED_MODULUS = 2 ** 64

# Spawn keys separating the streams derived from one seed
_SHARED_STREAM = 0
_FAST_STREAM = 1
_FILL_STREAM = 2


def normalize_seed(seed: int) -> int:
    """
    Map any Python integer onto a valid numpy seed.

    Seeds are reduced modulo 2**64, so negative seeds are accepted.

    Raises:
        ValidationError: If seed is not an integer
    """
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ValidationError(f"seed: expected an integer, got {type(seed).__name__}")
    return int(seed) % _SEED_MODULUS


def _seed_sequence(entropy: int, stream: int) -> np.random.SeedSequence:
    return np.random.SeedSequence(entropy, spawn_key=(stream,))


class RandomSource:
    """
    Uniform and Gaussian random draws with independent bulk fills.

    Args:
        seed: Integer seed for a reproducible source, or None for OS entropy
    """

    _shared: ClassVar[RandomSource | None] = None

    def __init__(self, seed: int | None = None):
        self._seed: int | None = None
        self._generator: np.random.Generator
        self._fast: np.random.Generator
        self._reseed(seed)

    def _reseed(self, seed: int | None) -> None:
        self._seed = None if seed is None else normalize_seed(seed)
        # Without a seed, one entropy draw roots both streams.
        entropy = np.random.SeedSequence().entropy if self._seed is None else self._seed
        self._generator = np.random.Generator(np.random.MT19937(_seed_sequence(entropy, _SHARED_STREAM)))
        self._fast = np.random.Generator(np.random.SFC64(_seed_sequence(entropy, _FAST_STREAM)))

    # --- Shared instance ---

    @classmethod
    def instance(cls) -> RandomSource:
        """Return the process-wide source, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide source; the next instance() creates a fresh one."""
        cls._shared = None

    # --- Shared stream ---

    def set_seed(self, seed: int) -> None:
        """
        Reinitialise the shared and fast streams from an integer seed.

        Subsequent draws are a deterministic function of the seed. Any
        integer is valid.
        """
        self._reseed(normalize_seed(seed))

    @property
    def seed(self) -> int | None:
        """Seed in effect, or None if the source was seeded from entropy."""
        return self._seed

    @property
    def generator(self) -> np.random.Generator:
        """
        Underlying numpy generator of the shared stream.

        Use it to draw other distributions from the same stream, e.g.
        RandomSource.instance().generator.poisson(3.0).
        """
        return self._generator

    def get_uniform(self, size: int | tuple[int, ...] | None = None) -> float | NDArray[np.float64]:
        """Double-precision value(s) uniformly sampled from [0, 1)."""
        return self._generator.random(size)

    def get_normal(self, size: int | tuple[int, ...] | None = None) -> float | NDArray[np.float64]:
        """Double-precision value(s) with mean 0 and RMS 1."""
        return self._generator.standard_normal(size)

    def get_fast_uniform(self) -> np.float32:
        """
        Single-precision value uniformly sampled from [0, 1).

        Drawn from a separate SFC64 stream; not tied to get_uniform.
        """
        return np.float32(self._fast.random(dtype=np.float32))

    # --- Seed-selected bulk fills ---

    def fill_array_uniform(
        self,
        out: NDArray[Any],
        *,
        seed: int,
        size: int | None = None,
    ) -> None:
        """
        Fill out[:size] with values uniformly sampled from [0, 1).

        The values depend only on seed, size and out.dtype: the shared
        stream is neither consulted nor advanced.

        Args:
            out: 1D float32 or float64 buffer aligned to 16 bytes
                (see allocate_aligned_array)
            seed: Seed selecting the fill stream
            size: Number of leading elements to fill (default: all)
        """
        target = _fill_target(out, size)
        gen = _fill_generator(seed)
        gen.random(dtype=target.dtype, out=target)

    def fill_array_normal(
        self,
        out: NDArray[Any],
        *,
        seed: int,
        size: int | None = None,
    ) -> None:
        """
        Fill out[:size] with standard normal values.

        Same independence guarantees as fill_array_uniform.
        """
        target = _fill_target(out, size)
        gen = _fill_generator(seed)
        gen.standard_normal(dtype=target.dtype, out=target)

    def __repr__(self) -> str:
        seed = 'entropy' if self._seed is None else self._seed
        return f"RandomSource(seed={seed})"


def _fill_generator(seed: int) -> np.random.Generator:
    return np.random.Generator(np.random.SFC64(_seed_sequence(normalize_seed(seed), _FILL_STREAM)))


def _fill_target(out: NDArray[Any], size: int | None) -> NDArray[Any]:
    if not isinstance(out, np.ndarray):
        raise ValidationError(f"out: expected a numpy array, got {type(out).__name__}")
    if out.ndim != 1:
        raise ValidationError(f"out: expected a 1D array, got shape {out.shape}")
    if out.dtype not in (np.float32, np.float64):
        raise ValidationError(f"out: dtype must be float32 or float64, got {out.dtype}")
    if not out.flags.c_contiguous or not out.flags.writeable:
        raise ValidationError("out: must be a writable, contiguous array")
    if not is_aligned(out):
        raise ValidationError(
            f"out: data pointer is not {ALIGNMENT_BYTES}-byte aligned; "
            f"allocate it with allocate_aligned_array"
        )
    n = out.shape[0] if size is None else check_non_negative_int(size, "size")
    if n > out.shape[0]:
        raise ValidationError(f"size: {n} exceeds buffer length {out.shape[0]}")
    return out[:n]

"""
Deterministic pseudo-random sequence generator.

Park-Miller "minimal standard" multiplicative congruential generator
(modulus 2^31 - 1, multiplier 16807), evaluated with Schrage's
factorisation so that no intermediate product leaves 32-bit range.
"""

MODULUS = 2147483647
MULTIPLIER = 16807
_Q = 127773  # MODULUS // MULTIPLIER
_R = 2836  # MODULUS % MULTIPLIER


class MinStdGenerator:
    """
    Reproducible integer sequence generator.

    Not thread-safe: a generator must be driven in program order by a
    single caller. Independent searches need independent generators.

    Attributes:
        state: Current internal state, in [1, MODULUS - 1]
    """

    def __init__(self, seed: int = 1):
        """
        Initialize the generator.

        Args:
            seed: Initial state, in [1, 2147483646]
        """
        self._validate_seed(seed)
        self._state = seed

    @staticmethod
    def _validate_seed(seed: int) -> None:
        """Validate the initial state."""
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ValueError("seed must be an integer")
        # 0 is a fixed point of the recurrence
        if not 1 <= seed < MODULUS:
            raise ValueError(f"seed must be in [1, {MODULUS - 1}]")

    @property
    def state(self) -> int:
        return self._state

    def next(self, n: int) -> int:
        """
        Advance the sequence and return a value in [0, n-1].

        Args:
            n: Size of the range (must be at least 1)

        Returns:
            The new state reduced modulo n
        """
        if n < 1:
            raise ValueError("n must be at least 1")
        s = MULTIPLIER * (self._state % _Q) - _R * (self._state // _Q)
        if s <= 0:
            s += MODULUS
        self._state = s
        return s % n

    def copy(self) -> "MinStdGenerator":
        """Create an independent generator at the same point of the sequence."""
        return MinStdGenerator(self._state)

    def __repr__(self) -> str:
        return f"MinStdGenerator(state={self._state})"

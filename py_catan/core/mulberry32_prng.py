"""
Python implementation of the mulberry32 PRNG used by the board generator.

Every intermediate value is kept as an unsigned 32-bit integer so the
sequence matches the JavaScript version (Math.imul, >>> 0) bit for bit.
"""


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


def _imul(a, b):
    """32-bit multiply with wraparound, like JavaScript's Math.imul."""
    return (_uint32(a) * _uint32(b)) & 0xFFFFFFFF


class Mulberry32PRNG:
    """
    Seeded mulberry32 generator.

    The state only moves forward; to replay a sequence construct a new
    instance from the same seed.
    """

    INCREMENT = 0x6D2B79F5
    SCALE = 4294967296  # 2^32

    def __init__(self, seed):
        """Initialize with a 32-bit integer seed (signed values are wrapped)."""
        self.call_count = 0
        self.seed = int(seed)
        self.state = _uint32(seed)

    def random(self):
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        self.state = _uint32(self.state + self.INCREMENT)
        s = self.state
        t = _imul(s ^ (s >> 15), s | 1)
        t = _uint32(t + _imul(t ^ (t >> 7), t | 61)) ^ t
        return _uint32(t ^ (t >> 14)) / self.SCALE

    def randint(self, n):
        """Return an integer in [0, n) drawn with a single call."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return int(self.random() * n)

import numpy as np

from int_values import as_int, as_int_array

#------------------------------------------------------------------------------
# Array-backed Fenwick (binary indexed) tree
#------------------------------------------------------------------------------

class FenwickTree:
    """
    Prefix sums over positions 1..n with O(log n) point update and query.

    Slot i of the array holds the sum of the segment (i - lsb(i), i], so
    updates climb with  i += i & -i  and queries descend with  i -= i & -i.
    Slots hold Python ints, so sums never overflow.
    """
    def __init__(self, n: int):
        n = as_int(n, "size")
        if n < 1:
            raise ValueError(f"size must be positive, got {n}")
        self.n = n
        self.tree = np.zeros(n + 1, dtype=object)     # slot 0 unused

        # largest power of two <= n, starting step for find()
        self._top = 1 << (n.bit_length() - 1)

    @classmethod
    def from_values(cls, values) -> "FenwickTree":
        """Build from values[0..n-1] (positions 1..n) in linear time."""
        values = as_int_array(values)
        ft = cls(len(values))
        tree = ft.tree
        tree[1:] = values
        for i in range(1, ft.n + 1):
            j = i + (i & -i)
            if j <= ft.n:
                tree[j] += tree[i]
        return ft

    def __len__(self) -> int:
        return self.n

    def _check(self, i) -> int:
        i = as_int(i, "position")
        if not 1 <= i <= self.n:
            raise IndexError(f"position {i} outside [1, {self.n}]")
        return i

    def update(self, i: int, delta: int) -> None:
        """Add `delta` at position i."""
        i = self._check(i)
        delta = as_int(delta, "delta")
        while i <= self.n:
            self.tree[i] += delta
            i += i & -i

    def prefix_query(self, i: int) -> int:
        """Sum of positions 1..i; 0 for i == 0."""
        i = as_int(i, "position")
        if i != 0:
            self._check(i)
        s = 0
        while i > 0:
            s += self.tree[i]
            i -= i & -i
        return s

    def range_query(self, i: int, j: int) -> int:
        """Sum of positions i..j (inclusive); 0 when i > j."""
        i, j = as_int(i, "position"), as_int(j, "position")
        if i > j:
            return 0
        return self.prefix_query(j) - self.prefix_query(i - 1)

    def value(self, i: int) -> int:
        return self.range_query(i, i)

    def total(self) -> int:
        return self.prefix_query(self.n)

    def find(self, target: int) -> int:
        """
        Smallest position whose prefix sum is >= target, assuming all
        values are non-negative.  Returns n + 1 if the total is too small.
        """
        target = as_int(target, "target")
        if target <= 0:
            return 1
        pos  = 0
        rem  = target
        step = self._top
        while step > 0:
            nxt = pos + step
            if nxt <= self.n and self.tree[nxt] < rem:
                pos = nxt
                rem -= self.tree[nxt]
            step >>= 1
        return pos + 1

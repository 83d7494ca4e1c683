import numpy as np

from int_values import as_int, as_int_array

#------------------------------------------------------------------------------
# Range-sum segment tree over a static closed interval [lo, hi]
#------------------------------------------------------------------------------

class SegmentTree:
    """
    Point update / range sum over the integer positions lo..hi (inclusive).

    Node sums live in a flat array addressed heap-style: the root is node 1
    and covers [lo, hi]; node v covering [nl, nr] has children 2v and 2v+1
    covering [nl, mid] and [mid+1, nr].  Both operations walk one
    root-to-leaf path (update) or O(log n) disjoint nodes (query).

    The array holds Python ints, so sums never overflow.
    """
    def __init__(self, lo: int, hi: int, values=None):
        lo, hi = as_int(lo, "lo"), as_int(hi, "hi")
        if lo > hi:
            raise ValueError(f"empty interval [{lo}, {hi}]")
        self.lo = lo
        self.hi = hi
        self.n  = hi - lo + 1
        self.tree = np.zeros(4 * self.n, dtype=object)

        if values is not None:
            values = as_int_array(values)
            if len(values) != self.n:
                raise ValueError(
                    f"expected {self.n} values for [{lo}, {hi}], got {len(values)}"
                )
            self._build(1, lo, hi, values)

    def __len__(self) -> int:
        return self.n

    def _build(self, node, nl, nr, values):
        if nl == nr:
            self.tree[node] = values[nl - self.lo]
            return
        mid = (nl + nr) // 2
        self._build(2 * node,     nl,      mid, values)
        self._build(2 * node + 1, mid + 1, nr,  values)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def _check(self, i):
        i = as_int(i, "position")
        if not self.lo <= i <= self.hi:
            raise IndexError(f"position {i} outside [{self.lo}, {self.hi}]")
        return i

    # ------------------------------------------------------------
    # point update
    # ------------------------------------------------------------
    def update(self, i: int, delta: int) -> None:
        """Add `delta` to the value stored at position i."""
        i = self._check(i)
        self._update(1, self.lo, self.hi, i, as_int(delta, "delta"))

    def _update(self, node, nl, nr, i, delta):
        self.tree[node] += delta
        if nl == nr:
            return
        mid = (nl + nr) // 2
        if i <= mid:
            self._update(2 * node, nl, mid, i, delta)
        else:
            self._update(2 * node + 1, mid + 1, nr, i, delta)

    # ------------------------------------------------------------
    # range query
    # ------------------------------------------------------------
    def query(self, l: int, r: int) -> int:
        """
        Sum over positions l..r (inclusive), clipped to [lo, hi].
        An empty or disjoint range sums to 0.
        """
        l, r = as_int(l, "l"), as_int(r, "r")
        l, r = max(l, self.lo), min(r, self.hi)
        if l > r:
            return 0
        return int(self._query(1, self.lo, self.hi, l, r))

    def _query(self, node, nl, nr, ql, qr):
        if nr < ql or nl > qr:
            return 0
        if ql <= nl and nr <= qr:
            return self.tree[node]
        mid = (nl + nr) // 2
        return (self._query(2 * node,     nl,      mid, ql, qr) +
                self._query(2 * node + 1, mid + 1, nr,  ql, qr))

    def value(self, i: int) -> int:
        i = self._check(i)
        return self.query(i, i)

    def total(self) -> int:
        return int(self.tree[1])

import operator
import numpy as np

#------------------------------------------------------------------------------
# Integer coercion shared by the array-backed trees
#------------------------------------------------------------------------------

def as_int(x, name: str = "value") -> int:
    """Python int from an int or numpy integer; TypeError for anything else."""
    if isinstance(x, (bool, np.bool_)):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        return operator.index(x)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(x).__name__}") from None


def as_int_array(values) -> np.ndarray:
    """
    One-dimensional object array of Python ints.  Object storage keeps the
    sums exact where int64 would wrap around.
    """
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise ValueError(f"expected a 1-d sequence of values, got shape {arr.shape}")
    if arr.size and arr.dtype != object and not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"values must be integers, got dtype {arr.dtype}")
    return np.array([as_int(v) for v in arr], dtype=object)

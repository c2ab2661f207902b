# aad/ops/transcendental.py
import numpy as np
from .arithmetic import _as_value, _record

def tanh(x, *, name=None):
    x = _as_value(x)
    return _record("tanh", np.tanh(x.val), (x,), name=name)

def exp(x, *, name=None):
    x = _as_value(x)
    with np.errstate(all="ignore"):
        ex = np.exp(x.val)
    return _record("exp", ex, (x,), name=name)

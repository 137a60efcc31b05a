"""
Kernel layer.

`pairpool/kernels/python/` holds the arithmetic the pool operations are built
on: checked integer helpers, the swap pricing curve and the claim-token
mint/burn formulas.
"""

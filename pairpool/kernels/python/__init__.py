"""
Pool kernels.

These modules are:
- deterministic (integer-only, floor rounding),
- width-checked (u64 amounts, u128 intermediates),
- pure functions with typed results, no state and no logging.
"""

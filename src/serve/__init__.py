"""Device resolution components.

This package turns validated device settings into the ordered devices
each process of a distributed training job owns.
"""

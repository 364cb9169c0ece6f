"""
Property-based testing suite for arbitrary_kit.

Uses Hypothesis to drive the providers through the strategy bridge and
verify their invariants over many generated parameter sets.
"""

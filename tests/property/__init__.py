"""Property-based tests for the cleaning pipelines.

Coverage:
    - cleaned-text guarantees over generated PDF-like noise, in both modes
    - fixed-point behaviour of repeated cleaning
    - stages never lengthening their input

Uses hypothesis; assertions are plain so failing examples get shrunk.
"""

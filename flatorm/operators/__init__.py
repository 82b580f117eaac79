"""flatorm operators.

One subpackage per dialect, each providing a connector, a statement
generator and a type mapper, plus the shared SQL base classes.
"""

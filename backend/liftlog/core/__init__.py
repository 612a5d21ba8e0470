"""Pure training computations: no I/O, no shared state."""

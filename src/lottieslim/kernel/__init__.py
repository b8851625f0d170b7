"""Document rewriting kernel: tree primitives, passes, and the pass pipeline."""

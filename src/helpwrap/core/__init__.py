"""Core logic: argument capture, rewrite policy, configuration and delegation."""

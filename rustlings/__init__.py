"""Small exercises for learning Rust, with a command that compiles, runs and tracks them."""

__version__ = "5.0.0"
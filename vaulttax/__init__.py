"""Fixed-point decimals and capped stable-coin transfer tax."""

__version__ = "0.1.0"
__all__ = ["decimal", "tax"]
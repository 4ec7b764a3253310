"""BN254 base field and its Fq2, Fq6 and Fq12 extension tower."""

__version__ = "0.1.0"

__all__ = ["arithmetic", "fq", "fq2", "fq6", "fq12"]
"""gpgv-trust: signature trust decisions for downloaded artifacts."""

__version__ = "1.0.0"

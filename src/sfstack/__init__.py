"""Task runner for a Symfony project with a Docker development stack."""

__version__ = "0.1.0"

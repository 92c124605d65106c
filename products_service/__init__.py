"""Products service: a product catalog microservice."""

__version__ = "0.1.0"

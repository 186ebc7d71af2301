"""secretport - uniform secret-provider contract with pluggable backends."""

__version__ = "0.1.0"

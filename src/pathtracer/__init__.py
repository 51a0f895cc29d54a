"""CPU path tracer for sphere scenes with diffuse, metal and glass surfaces."""

__version__ = "0.1.0"

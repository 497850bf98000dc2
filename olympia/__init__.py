"""Core model data types (trace markers, vector config, flushing, memory and load/store state) and the Dhrystone benchmark."""

__version__ = "0.1.0"
"""Engine core: events, input state, layers, cameras, transforms, profiling and renderer descriptions."""

__version__ = "0.1.0"
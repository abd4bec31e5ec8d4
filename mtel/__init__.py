"""A tiny stack-based token language: type system, typed stack, commands, byte-code execution and a file runner."""

__version__ = "0.0.1"
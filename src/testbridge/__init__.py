"""testbridge - run opaque CppUTest executables from a generic test host."""

__version__ = "0.1.0"

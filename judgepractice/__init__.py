"""Solutions to classic online-judge practice problems, with a command line runner."""

__version__ = "0.1.0"
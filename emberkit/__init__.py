"""String, path, byte-buffer, file and command-line argument helpers."""

__version__ = "0.1.0"
__all__ = ["textops", "strings", "util", "path", "arguments", "data", "fileio"]
"""Output writing exports."""

from .documentation_writer import write_documentation
from .output_directory import OutputDirectoryError, prepare_output_directory

__all__ = [
    "OutputDirectoryError",
    "prepare_output_directory",
    "write_documentation",
]

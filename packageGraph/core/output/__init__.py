"""
Writing graph descriptions to DOT files or rendered images.
"""

from .dispatcher import OutputDispatcher, default_output_path, output_format, write_output

__all__ = ['OutputDispatcher', 'default_output_path', 'output_format', 'write_output']

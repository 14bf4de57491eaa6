"""
Output stage: record renderers and sink writing.
"""

from .renderers import CompactRenderer, PrettyRenderer
from .writer import OutputStage

__all__ = ["CompactRenderer", "PrettyRenderer", "OutputStage"]

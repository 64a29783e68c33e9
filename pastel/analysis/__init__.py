"""Analysis module for summarizing and charting rich pastels."""

from .summary import SolutionSummary, summarize, decode_signatures, rich_line_mask
from .visualizer import Visualizer

__all__ = ["SolutionSummary", "summarize", "decode_signatures", "rich_line_mask", "Visualizer"]

"""
Breakpoints component - Responsive viewport widths.
"""

from .component import BREAKPOINT_STEP, BREAKPOINT_UNIT, resolve_breakpoints
from .models import Breakpoints, BreakpointValues

__all__ = [
    "resolve_breakpoints",
    "Breakpoints",
    "BreakpointValues",
    "BREAKPOINT_STEP",
    "BREAKPOINT_UNIT",
]

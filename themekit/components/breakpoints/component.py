"""
Breakpoints component - The one canonical breakpoint set.

Takes no input; every call returns an equal, independent Breakpoints value.
"""

from __future__ import annotations

from .models import BreakpointValues, Breakpoints

BREAKPOINT_UNIT = "px"
BREAKPOINT_STEP = 5


def resolve_breakpoints() -> Breakpoints:
    """Build the default breakpoints."""
    values = BreakpointValues(xs=0, sm=544, md=769, lg=992, xl=1200, xxl=1440)
    return Breakpoints(
        values=values,
        keys=BreakpointValues.keys(),
        unit=BREAKPOINT_UNIT,
        step=BREAKPOINT_STEP,
    )

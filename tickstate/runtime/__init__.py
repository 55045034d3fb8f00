"""
Runtime package for driving machines over time.

Architecture:
- Executor ticks one machine at a fixed rate
- Elapsed time is passed to ``StateMachine.update``
"""

from .executor import Executor

__all__ = ["Executor"]

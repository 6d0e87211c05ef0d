"""
Scheduler module for TicTacToe.
Drives the AI opponent's moves on the UI event loop.
"""

from .config import SchedulerConfig
from .ai_scheduler import AIScheduler

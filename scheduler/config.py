"""
Scheduler configuration for TicTacToe.
Timing values for the AI "thinking" pause.
"""


class SchedulerConfig:
    """
    Configuration for the AI move scheduler.

    All times are in MILLISECONDS, same unit as tkinter's after().
    """

    # ==================== THINKING DELAY ====================
    # The AI waits a random time in this range before moving,
    # so its reply doesn't appear instantly after the human's move
    AI_DELAY_MIN_MS = 300
    AI_DELAY_MAX_MS = 600

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

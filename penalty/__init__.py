"""
Penalty tracker: time-decayed leaderboards and Hall of Fame statistics
for shooter/keeper penalty records.
"""

__version__ = "1.0.0"

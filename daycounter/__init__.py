"""
daycounter - Scheduled Session Counter

Counts the scheduled sessions that fall within a date range, given a weekly
pattern of session days and a file of excluded dates, and reports how many
distinct ISO weeks the range spans.
"""

__version__ = "0.1.0"
__author__ = "daycounter Team"

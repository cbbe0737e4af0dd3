"""
Bench Order: ordering and logical grouping for benchmark harness results.

Decides the order in which benchmark cases run and how finished results are
grouped and ordered for reporting, including baseline-relative grouping.
"""

__version__ = "0.1.0"

"""
Electricity Price Explorer: statistics, hourly profiles and load-cost
computations over CSV electricity price datasets.
"""

__version__ = "1.0.0"

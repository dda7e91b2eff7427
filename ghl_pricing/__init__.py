"""
GHL Pricing - Agency Pricing Calculation Engine

A stateless calculation library for agency pricing scenarios. Turns
hypothetical usage figures (message volumes, client counts, markup
percentages) into costs, revenues, profit projections and derived
business metrics.
"""

__version__ = "0.1.0"
__author__ = "GHL Pricing Team"

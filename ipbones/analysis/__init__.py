"""Tabular views over valuation results (trend chart data, batch runs)."""

from ipbones.analysis.trend import trend_frame, trend_segment

__all__ = ['trend_frame', 'trend_segment']

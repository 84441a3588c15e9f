"""Chart layout: boxes, ranges, series, colors and line, bar and donut chart geometry."""

__version__ = "0.1.0"
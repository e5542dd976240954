"""Stage 2: Color Analysis - выделенный (красный) текст."""

from .color_classifier import ColorAnalysis, ColorClassifier

__all__ = ["ColorAnalysis", "ColorClassifier"]

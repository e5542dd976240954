"""Stage 4: Industry Sections - карточка здания."""

from .header_classifier import HeaderClassifier
from .stage import SectionAssembler

__all__ = ["HeaderClassifier", "SectionAssembler"]

"""Book manuscript formatter package."""

from .models.line import ManuscriptLine
from .models.section import SectionRange

__all__ = ["ManuscriptLine", "SectionRange"]

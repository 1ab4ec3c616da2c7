"""Compilers for assembling the DOCX package parts."""

from .compiler import FragmentCompiler
from .content import ContentBuilder
from .packager import Packager
from .relationships import RelationshipIndex

__all__ = ["ContentBuilder", "FragmentCompiler", "Packager", "RelationshipIndex"]

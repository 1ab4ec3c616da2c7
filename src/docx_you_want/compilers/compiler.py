"""Base class for XML fragment compilers."""

from abc import ABC, abstractmethod


class FragmentCompiler(ABC):
    """Abstract base class for append-only XML fragment builders.

    Fragment compilers accumulate entries while pages are registered and
    render them once, as a string that is spliced into a skeleton part.
    """

    @abstractmethod
    def serialize(self) -> str:
        """Render all accumulated entries.

        Returns:
            XML fragment in insertion order (empty string when nothing was added)
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

"""Pipeline driving a whole PDF through the package workspace."""

from .orchestrator import Orchestrator

__all__ = ["Orchestrator"]

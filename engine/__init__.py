"""
engine/
-------
Dispatch, storage and logging around the step engines.

    from engine import generate, Visualization, VisualizationStore
"""

from engine.dispatch import Visualization, generate
from engine.store    import SavedVisualization, VisualizationStore

__all__ = [
    "Visualization",
    "generate",
    "SavedVisualization",
    "VisualizationStore",
]

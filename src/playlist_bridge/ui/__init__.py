"""UI layer for playlist-bridge.

Contains:
- state / actions: immutable view states and the actions that drive them
- selectors: filter, search and stats projections
- controllers: one per routed view, owning state and calling the API
- components: Rich rendering of each view
"""

__all__ = []

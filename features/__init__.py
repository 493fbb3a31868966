# Features package
"""
Self-contained page features for the landing page.

Each feature module keeps its own state handling so the page only wires
widgets to it.
"""

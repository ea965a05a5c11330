"""Sightforge - Convert traced outlines into War Thunder user sights.

Sightforge is a CLI tool that converts a traced SVG outline (move, line and
cubic bezier commands) into a War Thunder user-sight ``.blk`` file. Curves are
flattened into straight lines under the game's hard limit on line primitives,
and the result is centered and scaled into the sight frame.

Example:
    $ sightforge emblem.svg

This will create emblem_sight.blk next to the input file.
"""

__version__ = "0.1.0"
__author__ = "Sightforge Contributors"

__all__ = ["__author__", "__version__"]

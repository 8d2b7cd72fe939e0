"""
Chromaconv Color Entity
=======================

The immutable ``Color`` value every conversion funnels through, its
stringifiers and the aggregate operations over it.

Features
--------
- Immutable instances (frozen after initialization)
- Channels clamped to range at construction (``ChannelClampWarning``)
- Formatting in every supported space with per-space rounding
- CSS name lookup for opaque colors
- Average and Sass-style mix

Usage
-----
>>> from chromaconv.colors import Color
>>>
>>> teal = Color(0, 128, 128)
>>> teal.hsl()
'hsl(180, 100%, 25%)'
>>> teal.name()
'teal'
>>> teal.with_alpha(0.5).hex()
'#00808080'
>>> Color.average([Color(255, 0, 0), Color(0, 0, 0, 0.5)]).rgba()
'rgba(128, 0, 0, 0.75)'

Notes
-----
- Stringifiers live in ``stringify`` and take the color by value
- ``average`` and ``mix`` are injected into ``Color`` by ``aggregate``
"""

from .color import Color, ChannelClampWarning
from .aggregate import average, mix
from .stringify import to_string


__all__ = ['Color', 'ChannelClampWarning', 'average', 'mix', 'to_string']

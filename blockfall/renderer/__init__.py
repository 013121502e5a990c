"""Rendering subpackage.

Turns immutable ``State`` snapshots into something a consumer can display:

* :mod:`blockfall.renderer.composite` builds one composited :class:`Grid`
  (border, world, ghost, active block, death zone and next-piece panel).
* :mod:`blockfall.renderer.text` formats that grid plus a status line as text.
* :mod:`blockfall.renderer.image` rasterises it with NumPy + Pillow.
"""

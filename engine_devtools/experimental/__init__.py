# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Experimental package initialization exposing the immutable array editor

"""Experimental helpers.

The array editor lives here while its API settles. Import the module rather
than the functions when names would clash with builtins:

    >>> from engine_devtools.experimental import arrays
    >>> arrays.insert_at([1, 3], 1, 2)
    [1, 2, 3]
"""

from . import arrays

__all__ = ['arrays']

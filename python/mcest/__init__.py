# Licensed under a 3-clause BSD-style license - see LICENSE.
# -*- coding: utf-8 -*-
"""
=====
MCEST
=====
Monte Carlo ESTimators, a Python package of random-sampling estimators for
quantities that are awkward to compute exactly.

Integration
-----------
Sample-mean estimate of the definite integral of a real function over an
interval.

Sphere volumes
--------------
Rejection-sampling estimate of the volume of a union of spheres, and of the
region covered by at least k of them, inside their bounding box.

Pi
--
The classic quarter-circle estimate of the value of pi.
"""

from ._version import __version__

from .sampler import UniformSampler
from .integration import integrate, MCIntegration
from .geometry import Point, Sphere, BoundingBox, bounding_box, theoretical_volume
from .sphere_volume import estimate_volumes
from .pi import estimate_pi

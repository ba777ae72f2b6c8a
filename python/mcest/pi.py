"""Monte Carlo estimation of the value of pi."""

import time

import numpy as np

from .sampler import UniformSampler, \
                     DEFAULT_BATCH_SIZE, \
                     check_num_samples, \
                     iter_batches
from .sphere_volume import binomial_error




def estimate_pi(n,
                seed=None,
                batch_size=DEFAULT_BATCH_SIZE,
                return_error=False,
                verbose=0):
    """
    Estimate pi from the fraction of points of the unit square that fall
    inside the quarter of the unit circle.

    Parameters
    ==========

    n : int
        Number of sample points, at least 1.

    seed : int, optional
        Seed for the uniform sampler.  Defaults to a time-derived value.

    batch_size : int
        Number of points drawn per batch.

    return_error : bool
        If True, also return the shot noise of the estimate.

    verbose : int
        Values greater than zero print timing output.

    Returns
    =======

    pi : float

    error : float
        Only if `return_error` is True.
    """

    n = check_num_samples(n)

    sampler = UniformSampler(seed)

    if verbose > 0:

        print("Sampling", n, "points in the unit square (seed {})".format(sampler.seed), flush=True)

    start_time = time.time()

    hits = 0

    for m in iter_batches(n, batch_size):

        xy = sampler.draw(0.0, 1.0, (m, 2))

        hits += int(np.count_nonzero(np.sum(xy*xy, axis=1) <= 1.0))

    # The quarter circle covers pi/4 of the unit square
    pi = 4.0*hits/n

    if verbose > 0:

        print("Time to estimate pi:", time.time() - start_time, flush=True)

    if return_error:

        return pi, binomial_error(4.0, hits, n)

    return pi

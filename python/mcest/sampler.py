'''
mcest.sampler
=============

Seeded uniform random draws shared by every estimator.
'''

import time

import numpy as np


# Number of samples drawn and classified per numpy call.  Bounds the memory of
# a run independently of its total sample count.
DEFAULT_BATCH_SIZE = 100000




def check_num_samples(n):
    '''
    Validate a requested sample count.

    Parameters
    ==========

    n : int
        Number of samples.  Must be a whole number no smaller than 1.

    Returns
    =======

    n : int

    Raises
    ======

    ValueError
        If n is zero, negative or not a whole number.
    '''

    if n != int(n) or n < 1:

        raise ValueError("Number of samples must be a positive integer, got {}".format(n))

    return int(n)




def iter_batches(n, batch_size=DEFAULT_BATCH_SIZE):
    '''
    Split n samples into consecutive batch sizes.

    Yields
    ======

    m : int
        Size of the next batch; the sizes sum to n.
    '''

    if batch_size < 1:

        raise ValueError("Batch size must be at least 1, got {}".format(batch_size))

    remaining = n

    while remaining > 0:

        m = min(batch_size, remaining)

        yield m

        remaining -= m




def default_seed():
    '''
    Derive a seed from the current wall-clock time.

    Used whenever an estimator is called without an explicit seed.  Runs
    seeded this way are not reproducible unless the returned value is kept.

    Returns
    =======

    seed : int
        Unsigned 32-bit integer.
    '''

    return time.time_ns() & 0xFFFFFFFF




class UniformSampler():
    """
    Description
    ===========
    Wraps a numpy random Generator and produces independent uniform draws over
    a requested real interval.

    For a fixed seed the sequence of draws is exactly reproducible.  An
    instance is not safe to share between threads; every estimation call
    creates its own.
    """

    def __init__(self, seed=None):
        """
        Parameters
        ==========

        seed : int or None
            Seed for the generator.  If None, a time-derived seed is used; the
            value actually used is kept in the `seed` attribute.
        """

        if seed is None:

            seed = default_seed()

        if seed < 0:

            raise ValueError("Sampler seed must be non-negative, got {}".format(seed))

        self.seed = int(seed)

        self.rng = np.random.default_rng(self.seed)


    def draw(self, low, high, size=None):
        """
        Draw uniformly distributed values over [low, high].

        Parameters
        ==========

        low, high : float or array_like
            Interval bounds.  Arrays broadcast against each other and `size`,
            which gives one independent interval per column (e.g. per axis).

        size : int or tuple of ints, optional
            Output shape.  If None, a single float is returned.

        Returns
        =======

        float or numpy.ndarray

        Raises
        ======

        ValueError
            If any lower bound is greater than its upper bound.
        """

        if np.any(np.asarray(low) > np.asarray(high)):

            raise ValueError("Lower bound {} is greater than upper bound {}".format(low, high))

        return self.rng.uniform(low, high, size)


    def __repr__(self):

        return "UniformSampler(seed={})".format(self.seed)

'''
mcest.integration
=================

Monte Carlo (sample-mean) estimate of one-dimensional definite integrals.
'''

import time

import numpy as np

from .sampler import UniformSampler, \
                     DEFAULT_BATCH_SIZE, \
                     check_num_samples, \
                     iter_batches




def integrate(f,
              a,
              b,
              n,
              seed=None,
              vectorized=False,
              batch_size=DEFAULT_BATCH_SIZE,
              return_error=False,
              verbose=0):
    """
    Estimate the integral of f over [a, b] with n uniform samples.

    The estimate is (b - a) times the mean of f over the samples.  Its
    statistical error shrinks as 1/sqrt(n).


    Parameters
    ==========

    f : callable
        Real function of one real variable.  Called once per sample, or once
        per batch with a numpy array if `vectorized` is True.

    a, b : float
        Integration limits.  If a > b the estimate over [b, a] is negated;
        if a == b the result is 0 and no samples are drawn.

    n : int
        Number of samples, at least 1.

    seed : int, optional
        Seed for the uniform sampler.  Defaults to a time-derived value.

    vectorized : bool
        Whether f accepts and returns numpy arrays.

    batch_size : int
        Number of samples drawn per batch.

    return_error : bool
        If True, also return the standard error of the estimate.

    verbose : int
        Values greater than zero print timing output.


    Returns
    =======

    estimate : float

    error : float
        Only if `return_error` is True.


    Raises
    ======

    ValueError
        If n is not a positive integer.
    """

    n = check_num_samples(n)

    if a == b:

        return (0.0, 0.0) if return_error else 0.0

    if a > b:

        result = integrate(f, b, a, n,
                           seed=seed,
                           vectorized=vectorized,
                           batch_size=batch_size,
                           return_error=return_error,
                           verbose=verbose)

        if return_error:

            return -result[0], result[1]

        return -result

    sampler = UniformSampler(seed)

    if verbose > 0:

        print("Integrating over [{}, {}] with {} samples (seed {})".format(a, b, n, sampler.seed),
              flush=True)

    start_time = time.time()

    # Running sums of f and f^2 over all samples
    total = 0.0

    total_sq = 0.0

    for m in iter_batches(n, batch_size):

        x = sampler.draw(a, b, m)

        if vectorized:

            fx = np.broadcast_to(np.asarray(f(x), dtype=np.float64), x.shape)

        else:

            fx = np.fromiter((f(xi) for xi in x), dtype=np.float64, count=m)

        total += np.sum(fx)

        total_sq += np.sum(fx*fx)

        if verbose > 1:

            print("  batch of", m, "samples, running sum", total, flush=True)

    width = b - a

    mean = total/n

    estimate = width*mean

    if verbose > 0:

        print("Time to integrate:", time.time() - start_time, flush=True)

    if not return_error:

        return estimate

    # Unbiased sample variance of f; zero for a single sample
    variance = 0.0

    if n > 1:

        variance = max(total_sq/n - mean*mean, 0.0)*n/(n - 1)

    error = width*np.sqrt(variance/n)

    return estimate, error




class MCIntegration():
    """
    Description
    ===========
    An integrand bound to the Monte Carlo integration engine.

    The integrand is fixed per instance, so the same estimator can be called
    repeatedly on different limits, sample counts and seeds:

        >>> square = MCIntegration(lambda x: x*x, label='x^2')
        >>> square(0., 1., 1000, seed=3)
    """

    def __init__(self, f, label=None, vectorized=False):
        """
        Parameters
        ==========

        f : callable
            Real function of one real variable.

        label : str, optional
            Human-readable form of f used in reports.

        vectorized : bool
            Whether f accepts and returns numpy arrays.
        """

        self.f = f

        self.label = label if label is not None else getattr(f, '__name__', 'f(x)')

        self.vectorized = vectorized


    def __call__(self, a, b, n, seed=None, **kwargs):
        """
        Estimate the integral of the bound function over [a, b].

        Keyword arguments are passed on to `integrate`.
        """

        return integrate(self.f, a, b, n, seed=seed, vectorized=self.vectorized, **kwargs)


    def __str__(self):

        return self.label




# Named integrands available from the command line
INTEGRANDS = {'gaussian' : MCIntegration(lambda x: np.exp(-x*x), 'e^(-x^2)', vectorized=True),
              'square'   : MCIntegration(lambda x: x*x, 'x^2', vectorized=True),
              'cube'     : MCIntegration(lambda x: x*x*x, 'x^3', vectorized=True),
              'sin'      : MCIntegration(np.sin, 'sin(x)', vectorized=True),
              'exp'      : MCIntegration(np.exp, 'e^x', vectorized=True),
              'sqrt'     : MCIntegration(np.sqrt, 'sqrt(x)', vectorized=True),
              'inverse'  : MCIntegration(lambda x: 1./x, '1/x', vectorized=True),
              }

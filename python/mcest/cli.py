'''
mcest.cli
=========

Driver programs for the estimators.  Installed as the mcest-pi,
mcest-integrate and mcest-spheres console scripts.

Exit status is 0 on success, 2 on a usage error (including a missing sphere
file argument), 1 when the sphere file cannot be read and 3 on a
configuration error such as a zero sample count or an empty sphere set.
'''

import sys
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter

from .config import Settings, load_config
from .geometry import bounding_box, to_spheres, theoretical_volume
from .integration import INTEGRANDS
from .pi import estimate_pi
from .preprocessing import read_spheres_file
from .report import Timer, pi_report, integration_report, spheres_report
from .sampler import default_seed
from .sphere_volume import estimate_volumes


EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2
EXIT_CONFIG_ERROR = 3

DEFAULT_PI_SAMPLES = 10000000
DEFAULT_INTEGRATION_SAMPLES = 1000000
DEFAULT_SPHERE_SAMPLES = 1000000




def _base_parser(description):

    p = ArgumentParser(description=description,
                       formatter_class=ArgumentDefaultsHelpFormatter)

    p.add_argument('-c', '--config', dest='config_file', default=None,
                   help='Estimator config file (INI format).')
    p.add_argument('-s', '--seed', type=int, default=None,
                   help='Random seed; a time-derived seed is used if not given.')
    p.add_argument('-v', '--verbose', action='count', default=None,
                   help='Print progress and timing output (repeat for more).')

    return p




def _settings(args, default_samples, **overrides):
    '''
    Combine config file settings with command line overrides.

    Raises
    ======

    OSError, ValueError
        If the config file cannot be read or a value is invalid.
    '''

    if args.config_file is not None:

        settings = load_config(args.config_file)

    else:

        settings = Settings()

    settings.update(num_samples=args.num_points,
                    seed=args.seed,
                    verbose=args.verbose,
                    **overrides)

    if settings.num_samples is None:

        settings.num_samples = default_samples

    if settings.seed is None:

        settings.seed = default_seed()

    return settings




def _error(message):

    print(message, file=sys.stderr, flush=True)




def pi_main(argv=None):
    '''Estimate pi.'''

    p = _base_parser('Monte Carlo estimate of the value of pi.')

    p.add_argument('num_points', nargs='?', type=int, default=None,
                   help='Number of random points (default {}).'.format(DEFAULT_PI_SAMPLES))

    args = p.parse_args(argv)

    try:

        settings = _settings(args, DEFAULT_PI_SAMPLES)

        with Timer() as timer:

            pi, error = estimate_pi(settings.num_samples,
                                    seed=settings.seed,
                                    batch_size=settings.batch_size,
                                    return_error=True,
                                    verbose=settings.verbose)

    except (OSError, ValueError) as err:

        _error("Configuration error: {}".format(err))

        return EXIT_CONFIG_ERROR

    print(pi_report(settings.num_samples, pi, error, settings.seed, timer.elapsed), flush=True)

    return EXIT_OK




def integrate_main(argv=None):
    '''Estimate a definite integral of one of the named integrands.'''

    p = _base_parser('Monte Carlo integration of a function of one variable.')

    p.add_argument('num_points', nargs='?', type=int, default=None,
                   help='Number of random points (default {}).'.format(DEFAULT_INTEGRATION_SAMPLES))
    p.add_argument('-f', '--function', default=None, choices=sorted(INTEGRANDS),
                   help='Integrand (default gaussian, e^(-x^2)).')
    p.add_argument('-a', '--lower', type=float, default=None,
                   help='Lower integration limit (default 0).')
    p.add_argument('-b', '--upper', type=float, default=None,
                   help='Upper integration limit (default 2).')

    args = p.parse_args(argv)

    try:

        settings = _settings(args, DEFAULT_INTEGRATION_SAMPLES,
                             function=args.function,
                             lower=args.lower,
                             upper=args.upper)

        if settings.function not in INTEGRANDS:

            raise ValueError("Unknown function {!r}, expected one of {}".format(settings.function,
                                                                                 ', '.join(sorted(INTEGRANDS))))

        integrand = INTEGRANDS[settings.function]

        with Timer() as timer:

            estimate, error = integrand(settings.lower,
                                        settings.upper,
                                        settings.num_samples,
                                        seed=settings.seed,
                                        batch_size=settings.batch_size,
                                        return_error=True,
                                        verbose=settings.verbose)

    except (OSError, ValueError) as err:

        _error("Configuration error: {}".format(err))

        return EXIT_CONFIG_ERROR

    print(integration_report(settings.num_samples,
                             integrand.label,
                             settings.lower,
                             settings.upper,
                             estimate,
                             error,
                             settings.seed,
                             timer.elapsed), flush=True)

    return EXIT_OK




def spheres_main(argv=None):
    '''Estimate the union and overlap volumes of the spheres in a file.'''

    p = _base_parser('Monte Carlo volume of a set of spheres and of their overlap.')

    p.add_argument('file_name', nargs='?', default=None,
                   help='Sphere file, one "x y z r" per line (or a FITS table).')
    p.add_argument('num_points', nargs='?', type=int, default=None,
                   help='Number of random points (default {}).'.format(DEFAULT_SPHERE_SAMPLES))
    p.add_argument('-k', '--overlap-threshold', dest='overlap_threshold', type=int, default=None,
                   help='Minimum number of spheres a point must be in to count as overlap (default 2).')

    args = p.parse_args(argv)

    try:

        settings = _settings(args, DEFAULT_SPHERE_SAMPLES,
                             overlap_threshold=args.overlap_threshold)

    except (OSError, ValueError) as err:

        _error("Configuration error: {}".format(err))

        return EXIT_CONFIG_ERROR

    file_name = args.file_name if args.file_name is not None else settings.input_catalog

    if file_name is None:

        p.error("the following arguments are required: file_name")

    try:

        spheres_table = read_spheres_file(file_name, verbose=settings.verbose)

    except (OSError, ValueError) as err:

        _error("Cannot open file: {} ({})".format(file_name, err))

        return EXIT_IO_ERROR

    try:

        with Timer() as timer:

            box = bounding_box(spheres_table)

            hit_volume, hit_error, overlap_volume, overlap_error = \
                estimate_volumes(spheres_table,
                                 settings.num_samples,
                                 overlap_threshold=settings.overlap_threshold,
                                 seed=settings.seed,
                                 batch_size=settings.batch_size,
                                 return_errors=True,
                                 verbose=settings.verbose)

    except ValueError as err:

        _error("Configuration error: {}".format(err))

        return EXIT_CONFIG_ERROR

    print(spheres_report(to_spheres(spheres_table),
                         box,
                         theoretical_volume(spheres_table),
                         settings.num_samples,
                         settings.overlap_threshold,
                         hit_volume,
                         hit_error,
                         overlap_volume,
                         overlap_error,
                         settings.seed,
                         timer.elapsed), flush=True)

    return EXIT_OK

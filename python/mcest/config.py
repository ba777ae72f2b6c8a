'''
mcest.config
============

Estimator settings read from an INI configuration file.

Example::

    [Settings]
    num_samples = 1000000
    seed = 12345
    overlap_threshold = 2
    batch_size = 100000
    verbose = 0

    [Paths]
    Input Catalog = spheres.txt

    [Integration]
    function = gaussian
    lower = 0
    upper = 2

Every key is optional.  A blank or absent seed means a time-derived seed.
'''

import configparser

from .sampler import DEFAULT_BATCH_SIZE, check_num_samples




class Settings():
    """
    Description
    ===========
    Values for one estimator run.  Attributes left as None are filled in by
    the command line program that uses them (e.g. its own default sample
    count).
    """

    def __init__(self,
                 num_samples=None,
                 seed=None,
                 overlap_threshold=2,
                 batch_size=DEFAULT_BATCH_SIZE,
                 verbose=0,
                 input_catalog=None,
                 function='gaussian',
                 lower=0.,
                 upper=2.):

        self.num_samples = num_samples

        self.seed = seed

        self.overlap_threshold = overlap_threshold

        self.batch_size = batch_size

        self.verbose = verbose

        self.input_catalog = input_catalog

        self.function = function

        self.lower = lower

        self.upper = upper

        self.validate()


    def validate(self):
        '''
        Check the values, raising ValueError on the first invalid one.
        '''

        if self.num_samples is not None:

            self.num_samples = check_num_samples(self.num_samples)

        if self.seed is not None and self.seed < 0:

            raise ValueError("seed must be non-negative, got {}".format(self.seed))

        if self.overlap_threshold < 1:

            raise ValueError("overlap_threshold must be at least 1, got {}".format(self.overlap_threshold))

        if self.batch_size < 1:

            raise ValueError("batch_size must be at least 1, got {}".format(self.batch_size))


    def update(self, **kwargs):
        '''
        Override settings, ignoring arguments that are None.
        '''

        for name, value in kwargs.items():

            if value is None:

                continue

            if not hasattr(self, name):

                raise AttributeError("Unknown setting {}".format(name))

            setattr(self, name, value)

        self.validate()

        return self


    def __repr__(self):

        return "Settings({})".format(', '.join('{}={!r}'.format(k, v) for k, v in vars(self).items()))




def _get(config, section, key, convert, default):

    if not config.has_option(section, key):

        return default

    value = config[section][key].strip()

    if value == '' or value == 'None':

        return default

    try:

        return convert(value)

    except ValueError:

        raise ValueError("Invalid value for [{}] {}: {!r}".format(section, key, value))




def _to_int(value):

    number = float(value)

    if number != int(number):

        raise ValueError(value)

    return int(number)




def load_config(configfile):
    """
    Read estimator settings from an INI file.

    Parameters
    ==========

    configfile : str
        Configuration file path, for a config file in INI format.

    Returns
    =======

    Settings

    Raises
    ======

    OSError
        If the file cannot be read.

    ValueError
        If the file is not valid INI or holds an invalid value.
    """

    config = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))

    try:

        read_files = config.read(configfile)

    except configparser.Error as error:

        raise ValueError("Cannot parse config file {}: {}".format(configfile, error))

    if not read_files:

        raise OSError("Cannot read config file {}".format(configfile))

    defaults = Settings()

    return Settings(num_samples=_get(config, 'Settings', 'num_samples', _to_int, defaults.num_samples),
                    seed=_get(config, 'Settings', 'seed', _to_int, defaults.seed),
                    overlap_threshold=_get(config, 'Settings', 'overlap_threshold', _to_int, defaults.overlap_threshold),
                    batch_size=_get(config, 'Settings', 'batch_size', _to_int, defaults.batch_size),
                    verbose=_get(config, 'Settings', 'verbose', _to_int, defaults.verbose),
                    input_catalog=_get(config, 'Paths', 'Input Catalog', str, defaults.input_catalog),
                    function=_get(config, 'Integration', 'function', str, defaults.function),
                    lower=_get(config, 'Integration', 'lower', float, defaults.lower),
                    upper=_get(config, 'Integration', 'upper', float, defaults.upper))

# -*- coding: utf-8 -*-
"""Unit tests of INI configuration loading.
"""
import os
import shutil
import tempfile
import unittest

from mcest.config import Settings, load_config
from mcest.sampler import DEFAULT_BATCH_SIZE

class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write(self, text):
        filename = os.path.join(self.tmpdir, 'config.ini')
        with open(filename, 'w') as f:
            f.write(text)
        return filename

    def test_full(self):
        inifile = self.write('[Settings]\n'
                             'num_samples = 1e5\n'
                             'seed = 12345 ; fixed for the paper\n'
                             'overlap_threshold = 3\n'
                             'batch_size = 5000\n'
                             'verbose = 1\n'
                             '\n'
                             '[Paths]\n'
                             'Input Catalog = spheres.txt\n'
                             '\n'
                             '[Integration]\n'
                             'function = square\n'
                             'lower = -1\n'
                             'upper = 1.5\n')
        settings = load_config(inifile)
        self.assertEqual(settings.num_samples, 100000)
        self.assertEqual(settings.seed, 12345)
        self.assertEqual(settings.overlap_threshold, 3)
        self.assertEqual(settings.batch_size, 5000)
        self.assertEqual(settings.verbose, 1)
        self.assertEqual(settings.input_catalog, 'spheres.txt')
        self.assertEqual(settings.function, 'square')
        self.assertEqual(settings.lower, -1.)
        self.assertEqual(settings.upper, 1.5)

    def test_defaults(self):
        settings = load_config(self.write('[Settings]\nseed =\n'))
        self.assertIsNone(settings.num_samples)
        self.assertIsNone(settings.seed)
        self.assertEqual(settings.overlap_threshold, 2)
        self.assertEqual(settings.batch_size, DEFAULT_BATCH_SIZE)
        self.assertIsNone(settings.input_catalog)
        self.assertEqual(settings.function, 'gaussian')
        self.assertEqual((settings.lower, settings.upper), (0., 2.))

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_config(os.path.join(self.tmpdir, 'missing.ini'))

    def test_malformed(self):
        with self.assertRaises(ValueError):
            load_config(self.write('num_samples = 10\n'))

    def test_invalid_values(self):
        for text in ['[Settings]\nnum_samples = 0\n',
                     '[Settings]\nnum_samples = lots\n',
                     '[Settings]\nseed = 1.5\n',
                     '[Settings]\noverlap_threshold = 0\n',
                     '[Integration]\nlower = zero\n']:
            with self.assertRaises(ValueError):
                load_config(self.write(text))


class TestSettings(unittest.TestCase):

    def test_update(self):
        settings = Settings(num_samples=10, seed=1)
        settings.update(num_samples=20, seed=None, overlap_threshold=4)
        self.assertEqual(settings.num_samples, 20)
        self.assertEqual(settings.seed, 1)
        self.assertEqual(settings.overlap_threshold, 4)

    def test_update_invalid(self):
        with self.assertRaises(ValueError):
            Settings().update(num_samples=0)
        with self.assertRaises(AttributeError):
            Settings().update(color='red')

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Settings(num_samples=-1)
        with self.assertRaises(ValueError):
            Settings(seed=-1)
        with self.assertRaises(ValueError):
            Settings(batch_size=0)

"""
Unit test test case mixin class.

This mixin class is intended for use with a subclass of
`unittest.TestCase`. It includes several convenience `assert...`
methods for analysis results.
"""


import numpy as np


SHOW_EXCEPTION_MESSAGES = False


class TestCaseMixin:
    
    
    def assert_raises(self, exception_class, function, *args, **kwargs):
        
        try:
            function(*args, **kwargs)

        except exception_class as e:
            if SHOW_EXCEPTION_MESSAGES:
                print(str(e))
                
        else:
            raise AssertionError(
                f'{exception_class.__name__} not raised by '
                f'{function.__name__}')
           
            
    def assert_arrays_equal(self, x, y):
        
        # We check shapes before comparing since `np.all` broadcasts its
        # arguments as needed but we don't want it to.
        x = np.asarray(x)
        y = np.asarray(y)
        self.assertEqual(x.shape, y.shape)
        self.assertTrue(np.all(x == y))
        
        
    def assert_arrays_close(self, x, y, rtol=1e-05, atol=1e-08):
        x = np.asarray(x)
        y = np.asarray(y)
        self.assertEqual(x.shape, y.shape)
        self.assertTrue(np.allclose(x, y, rtol=rtol, atol=atol))
        
        
    def assert_all_finite(self, x):
        self.assertTrue(np.all(np.isfinite(x)))

'''
Defines PrimeValue, an integer with two ways of asking whether it is prime

Use
pv = PrimeValue(12351315313)

pv.is_prime_cached()
sleeps and runs trial division the first time, then returns the stored
answer immediately on every later call.

pv.is_prime_computed()
sleeps and runs trial division on every call.
'''
import math
import time

DEFAULT_DELAY = 5


class BadPrimeValueError(TypeError):
    pass


def is_prime(n):
    ''' Trial division up to the integer square root of n '''
    if n <= 1:
        return False
    if n <= 3:
        return True

    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def memoize_on_instance(fn):
    '''
    A decorator for zero-argument methods.
    The first call stores the result on the instance; every later call
    returns the stored result without calling fn again.
    '''
    memo_attr = '_memo_' + fn.__name__

    def wrapper(self):
        try:
            return self.__dict__[memo_attr]
        except KeyError:
            pass
        rtn = fn(self)
        self.__dict__[memo_attr] = rtn
        return rtn

    wrapper.__name__ = fn.__name__
    wrapper.__doc__ = fn.__doc__
    wrapper.memo_attr = memo_attr

    return wrapper


class PrimeValue(object):
    ''' An immutable integer that knows whether it is prime '''

    def __init__(self, value, delay=DEFAULT_DELAY):
        if isinstance(value, bool) or not isinstance(value, int):
            raise BadPrimeValueError(
                "PrimeValue needs an int, got {}".format(type(value).__name__))
        self._value = value
        # Artificial delay so the memoization is visible in timings
        self.delay = delay

    @property
    def value(self):
        return self._value

    @property
    def cached_primality(self):
        ''' The stored answer of is_prime_cached, or None before its first call '''
        return self.__dict__.get(PrimeValue.is_prime_cached.memo_attr)

    def _check(self):
        if self.delay:
            time.sleep(self.delay)
        return is_prime(self._value)

    @memoize_on_instance
    def is_prime_cached(self):
        ''' Computed once, then reused '''
        return self._check()

    def is_prime_computed(self):
        ''' Recomputed on every call '''
        return self._check()

    def __repr__(self):
        return 'PrimeValue({})'.format(self._value)

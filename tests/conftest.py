import sys
import threading
from random import getrandbits

from gmpy2 import next_prime
from pytest import fixture


@fixture
def galois_field():
    from sumcheckpoly.field import GF
    from sumcheckpoly.config import Moduli

    return GF.get(Moduli.BN254)


@fixture
def polynomial(galois_field):
    from sumcheckpoly.polynomial import polynomials_over

    return polynomials_over(galois_field)


@fixture
def compressed_polynomial(polynomial):
    return polynomial.Compressed


@fixture
def fresh_primes():
    """Primes no test has built a field for yet."""

    def _fresh_primes(count):
        p = int(next_prime(getrandbits(128) | (1 << 127)))
        primes = []
        for _ in range(count):
            primes.append(p)
            p = int(next_prime(p))
        return primes

    return _fresh_primes


@fixture
def build_concurrently():
    def _build_concurrently(factory, args, num_threads=8):
        """Call ``factory(arg)`` for every arg from several threads at once.

        Returns, per arg, the list of objects the threads got back.
        """
        results = [[] for _ in args]
        barrier = threading.Barrier(num_threads)

        def worker():
            barrier.wait()
            for i, arg in enumerate(args):
                results[i].append(factory(arg))

        old_interval = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)
        try:
            threads = [threading.Thread(target=worker) for _ in range(num_threads)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
        finally:
            sys.setswitchinterval(old_interval)
        return results

    return _build_concurrently

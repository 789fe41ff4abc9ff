import logging
import random
from itertools import zip_longest

from .exceptions import (
    CompressionError,
    MalformedCompressedPolynomial,
    ZeroPolynomialError,
)
from .linearsolver import gaussian_elimination

UNIPOLY_BEGIN = b"UniPoly_begin"
UNIPOLY_END = b"UniPoly_end"
COEFF_LABEL = b"coeff"


def strip_trailing_zeros(a):
    end = len(a)
    while end > 0 and a[end - 1] == 0:
        end -= 1
    return list(a[:end])


_poly_cache = {}


def polynomials_over(field):
    """Return the dense univariate polynomial class over ``field``.

    Classes are cached, so two calls with the same field return the same
    class and its instances interoperate. The compressed representation of
    the same field is reachable as ``Polynomial.Compressed``.
    """
    if field in _poly_cache:
        return _poly_cache[field]

    def _lift(c):
        return field(c) if isinstance(c, int) else c

    class Polynomial(object):
        # ax^2 + bx + c is stored as [c, b, a]
        def __init__(self, coeffs):
            self.coeffs = [_lift(c) for c in coeffs]
            self.field = field

        def __reduce__(self):
            return (_rebuild_polynomial, (field, self.coeffs))

        @classmethod
        def from_coeffs(cls, coeffs):
            return cls(coeffs)

        @classmethod
        def zero(cls):
            return cls([])

        @classmethod
        def random(cls, degree, y0=None):
            coeffs = [
                field(random.randint(0, field.modulus - 1)) for _ in range(degree + 1)
            ]
            if y0 is not None:
                coeffs[0] = _lift(y0)
            return cls(coeffs)

        @classmethod
        def from_evals(cls, evals, solver=gaussian_elimination):
            """Interpolate the polynomial with ``p(i) == evals[i]``.

            The evaluation points are the integers ``0..n-1``, so the result
            has at most ``n`` coefficients. ``solver`` receives the augmented
            Vandermonde matrix and must return the coefficients in ascending
            degree order.
            """
            system = cls.vandermonde_system(evals)
            logging.debug("interpolating %d evaluations", len(system))
            return cls(solver(system))

        @staticmethod
        def vandermonde_system(evals):
            # row i is [1, x_i, x_i^2, ..., x_i^(n-1), y_i]
            n = len(evals)
            system = []
            for i, y in enumerate(evals):
                x = field.from_small_integer(i)
                row = [field.one()]
                for _ in range(1, n):
                    row.append(row[-1] * x)
                row.append(_lift(y))
                system.append(row)
            return system

        def is_zero(self):
            return all(c == 0 for c in self.coeffs)

        def degree(self):
            if not self.coeffs:
                raise ZeroPolynomialError("the zero polynomial has no degree")
            return len(self.coeffs) - 1

        def leading_coefficient(self):
            return self.coeffs[-1] if self.coeffs else None

        def as_vec(self):
            return list(self.coeffs)

        def trimmed(self):
            """Same polynomial without high-order zero coefficients."""
            return Polynomial(strip_trailing_zeros(self.coeffs))

        def eval_at_zero(self):
            return self.coeffs[0] if self.coeffs else field.zero()

        def eval_at_one(self):
            return sum(self.coeffs, field.zero())

        def evaluate(self, r):
            if not self.coeffs:
                return field.zero()
            r = _lift(r)
            y = self.coeffs[0]
            power = r
            for coeff in self.coeffs[1:]:
                y += coeff * power
                power *= r
            return y

        __call__ = evaluate

        def divide_with_q_and_r(self, divisor):
            """Divide by ``divisor`` and return ``(quotient, remainder)``.

            Returns ``None`` if ``divisor`` is the zero polynomial. Otherwise
            ``self == quotient * divisor + remainder`` and the remainder is
            either zero or of lower degree than the divisor.
            """
            if self.is_zero():
                return Polynomial.zero(), Polynomial.zero()
            if divisor.is_zero():
                return None

            dividend, divisor = self.trimmed(), divisor.trimmed()
            divisor_deg = divisor.degree()
            if dividend.degree() < divisor_deg:
                return Polynomial.zero(), dividend

            quotient = [field.zero()] * (dividend.degree() - divisor_deg + 1)
            remainder = dividend.as_vec()
            divisor_lc_inv = divisor.leading_coefficient().inverse()
            while remainder and len(remainder) - 1 >= divisor_deg:
                cur_q_coeff = remainder[-1] * divisor_lc_inv
                cur_q_degree = len(remainder) - 1 - divisor_deg
                quotient[cur_q_degree] = cur_q_coeff

                for i, div_coeff in enumerate(divisor.coeffs):
                    remainder[cur_q_degree + i] -= cur_q_coeff * div_coeff
                remainder = strip_trailing_zeros(remainder)

            return Polynomial(quotient), Polynomial(remainder)

        def __divmod__(self, divisor):
            result = self.divide_with_q_and_r(divisor)
            if result is None:
                raise ZeroDivisionError("polynomial division by zero")
            return result

        def __floordiv__(self, divisor):
            return divmod(self, divisor)[0]

        def __mod__(self, divisor):
            return divmod(self, divisor)[1]

        def compress(self):
            coeffs_except_linear_term = self.coeffs[:1] + self.coeffs[2:]
            if len(coeffs_except_linear_term) + 1 != len(self.coeffs):
                raise CompressionError(
                    f"cannot compress a polynomial with {len(self.coeffs)} coefficients"
                )
            return CompressedPolynomial(coeffs_except_linear_term)

        def append_to_transcript(self, label, transcript):
            transcript.append_message(label, UNIPOLY_BEGIN)
            for coeff in self.coeffs:
                transcript.append_scalar(COEFF_LABEL, coeff)
            transcript.append_message(label, UNIPOLY_END)

        def __repr__(self):
            if self.is_zero():
                return "0"
            return " + ".join(
                ["%s x^%d" % (a, i) if i > 0 else "%s" % a
                 for i, a in enumerate(self.coeffs)]
            )

        def __iter__(self):
            return iter(self.coeffs)

        def __len__(self):
            return len(self.coeffs)

        def __eq__(self, other):
            if not isinstance(other, Polynomial):
                return NotImplemented
            ours, theirs = self.coeffs, other.coeffs
            return strip_trailing_zeros(ours) == strip_trailing_zeros(theirs)

        def __hash__(self):
            return hash((field, tuple(strip_trailing_zeros(self.coeffs))))

        def __neg__(self):
            return Polynomial([-a for a in self])

        def __add__(self, other):
            new_coefficients = [
                a + b for a, b in zip_longest(self, other, fillvalue=field.zero())
            ]
            return Polynomial(new_coefficients)

        def __sub__(self, other):
            return self + (-other)

        def __mul__(self, other):
            if self.is_zero() or other.is_zero():
                return Polynomial.zero()

            new_coeffs = [field.zero() for _ in range(len(self) + len(other) - 1)]
            for i, a in enumerate(self):
                for j, b in enumerate(other):
                    new_coeffs[i + j] += a * b
            return Polynomial(new_coeffs)

    class CompressedPolynomial(object):
        # ax^2 + bx + c is stored as [c, a]
        def __init__(self, coeffs_except_linear_term):
            if len(coeffs_except_linear_term) == 0:
                raise MalformedCompressedPolynomial(
                    "a compressed polynomial keeps at least its constant term"
                )
            self.coeffs_except_linear_term = [
                _lift(c) for c in coeffs_except_linear_term
            ]
            self.field = field

        def __reduce__(self):
            return (_rebuild_compressed, (field, self.coeffs_except_linear_term))

        def degree(self):
            return len(self.coeffs_except_linear_term)

        def _linear_term(self, hint):
            # p(0) + p(1) = hint, so c1 = hint - 2 * c0 - (c2 + c3 + ...)
            constant = self.coeffs_except_linear_term[0]
            linear_term = _lift(hint) - constant - constant
            for c in self.coeffs_except_linear_term[1:]:
                linear_term -= c
            return linear_term

        def decompress(self, hint):
            """Rebuild the dense polynomial from ``hint == p(0) + p(1)``.

            The hint is trusted. Any other value yields a well-formed
            polynomial whose linear term is wrong, and nothing here detects
            it.
            """
            coeffs = [self.coeffs_except_linear_term[0], self._linear_term(hint)]
            coeffs.extend(self.coeffs_except_linear_term[1:])
            assert len(coeffs) == len(self.coeffs_except_linear_term) + 1
            return Polynomial(coeffs)

        def eval_from_hint(self, hint, x):
            """Evaluate the decompressed polynomial at ``x`` directly."""
            x = _lift(x)
            running_point = x
            running_sum = self.coeffs_except_linear_term[0] + x * self._linear_term(hint)
            for c in self.coeffs_except_linear_term[1:]:
                running_point *= x
                running_sum += c * running_point
            return running_sum

        def to_bytes(self):
            from .codec import encode_compressed

            return encode_compressed(self)

        @classmethod
        def from_bytes(cls, data):
            from .codec import decode_compressed

            return decode_compressed(field, data)

        def __len__(self):
            return len(self.coeffs_except_linear_term)

        def __eq__(self, other):
            if not isinstance(other, CompressedPolynomial):
                return NotImplemented
            return self.coeffs_except_linear_term == other.coeffs_except_linear_term

        def __hash__(self):
            return hash((field, tuple(self.coeffs_except_linear_term)))

        def __repr__(self):
            return f"CompressedPolynomial({self.coeffs_except_linear_term!r})"

    Polynomial.Compressed = CompressedPolynomial
    return _poly_cache.setdefault(field, Polynomial)


def compressed_polynomials_over(field):
    return polynomials_over(field).Compressed


def _rebuild_polynomial(field, coeffs):
    return polynomials_over(field)(coeffs)


def _rebuild_compressed(field, coeffs):
    return compressed_polynomials_over(field)(coeffs)

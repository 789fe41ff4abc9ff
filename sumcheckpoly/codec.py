"""
Wire format for compressed round polynomials.

A payload is the number of stored coefficients as an unsigned 64-bit
little-endian integer, followed by every coefficient in order, each one
encoded little-endian on ``field.byte_length`` bytes::

    | count (8) | c0 | c2 | c3 | ... |

Decoding is strict: the payload length must match the count exactly and
every coefficient must be a canonical field element.
"""
import logging

from .exceptions import MalformedCompressedPolynomial
from .polynomial import compressed_polynomials_over

LENGTH_PREFIX_SIZE = 8


def encode_compressed(compressed):
    coeffs = compressed.coeffs_except_linear_term
    out = bytearray(len(coeffs).to_bytes(LENGTH_PREFIX_SIZE, "little"))
    for c in coeffs:
        out += c.to_bytes()
    return bytes(out)


def decode_compressed(field, data):
    data = bytes(data)
    if len(data) < LENGTH_PREFIX_SIZE:
        raise MalformedCompressedPolynomial(
            f"payload of {len(data)} bytes has no length prefix"
        )

    count = int.from_bytes(data[:LENGTH_PREFIX_SIZE], "little")
    width = field.byte_length
    expected = LENGTH_PREFIX_SIZE + count * width
    if count == 0 or len(data) != expected:
        logging.debug(
            "rejecting compressed polynomial: count=%d, %d bytes, expected %d",
            count,
            len(data),
            expected,
        )
        raise MalformedCompressedPolynomial(
            f"length prefix {count} does not match a payload of {len(data)} bytes"
        )

    coeffs = []
    for start in range(LENGTH_PREFIX_SIZE, expected, width):
        try:
            coeffs.append(field.element_from_bytes(data[start : start + width]))
        except ValueError as e:
            raise MalformedCompressedPolynomial(str(e)) from e

    return compressed_polynomials_over(field)(coeffs)

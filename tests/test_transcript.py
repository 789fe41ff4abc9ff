import pytest

from sumcheckpoly.polynomial import COEFF_LABEL, UNIPOLY_BEGIN, UNIPOLY_END
from sumcheckpoly.transcript import Transcript


def test_append_to_transcript_order(mocker, polynomial):
    transcript = mocker.Mock()
    poly = polynomial([1, 3, 2])
    poly.append_to_transcript(b"poly", transcript)

    assert transcript.mock_calls == [
        mocker.call.append_message(b"poly", UNIPOLY_BEGIN),
        mocker.call.append_scalar(COEFF_LABEL, poly.coeffs[0]),
        mocker.call.append_scalar(COEFF_LABEL, poly.coeffs[1]),
        mocker.call.append_scalar(COEFF_LABEL, poly.coeffs[2]),
        mocker.call.append_message(b"poly", UNIPOLY_END),
    ]
    assert poly.as_vec() == [1, 3, 2]


def test_append_to_transcript_matches_manual_appends(galois_field, polynomial):
    poly = polynomial([4, 5, 6])
    t1 = Transcript(b"sumcheck", galois_field)
    poly.append_to_transcript(b"round", t1)

    t2 = Transcript(b"sumcheck", galois_field)
    t2.append_message(b"round", b"UniPoly_begin")
    for c in [4, 5, 6]:
        t2.append_scalar(b"coeff", c)
    t2.append_message(b"round", b"UniPoly_end")

    assert t1.state == t2.state
    assert t1.challenge_scalar() == t2.challenge_scalar()


def test_transcript_is_order_sensitive(galois_field):
    t1 = Transcript(b"test", galois_field)
    t1.append_scalar(b"a", galois_field(1))
    t1.append_scalar(b"a", galois_field(2))

    t2 = Transcript(b"test", galois_field)
    t2.append_scalar(b"a", galois_field(2))
    t2.append_scalar(b"a", galois_field(1))

    assert t1.state != t2.state


def test_transcript_label_separates_domains(galois_field):
    t1 = Transcript(b"one", galois_field)
    t2 = Transcript(b"two", galois_field)
    assert t1.challenge_scalar() != t2.challenge_scalar()


def test_challenges_are_deterministic(galois_field):
    t1 = Transcript("test", galois_field)
    t2 = t1.copy()
    assert t1.challenge_vector(3) == t2.challenge_vector(3)
    assert t1.n_rounds == t2.n_rounds


def test_challenge_bytes_length(galois_field):
    t = Transcript(b"test", galois_field)
    assert len(t.challenge_bytes(5)) == 5
    assert len(t.challenge_bytes(70)) == 70


def test_challenge_scalar_powers(galois_field):
    t1 = Transcript(b"powers", galois_field)
    t2 = t1.copy()
    powers = t1.challenge_scalar_powers(4)
    q = t2.challenge_scalar()
    assert powers == [1, q, q * q, q * q * q]


def test_append_scalars_differs_from_single_appends(galois_field):
    scalars = [galois_field(1), galois_field(2)]
    t1 = Transcript(b"test", galois_field)
    t1.append_scalars(b"xs", scalars)

    t2 = Transcript(b"test", galois_field)
    for s in scalars:
        t2.append_scalar(b"xs", s)

    assert t1.state != t2.state


def test_append_u64_rejects_out_of_range(galois_field):
    t = Transcript(b"test", galois_field)
    for bad in [-1, 1 << 64, "3"]:
        with pytest.raises(ValueError):
            t.append_u64(b"n", bad)
    assert t.n_rounds == 0

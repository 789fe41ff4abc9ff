import hashlib

STATE_SIZE = 32
U64_MAX = (1 << 64) - 1


def _as_bytes(label):
    return label.encode() if isinstance(label, str) else bytes(label)


class Transcript(object):
    """Fiat-Shamir transcript over SHA-256.

    Every append absorbs ``state := H(state || round || payload)`` and
    bumps the round counter, so both the content and the order of the
    appends determine the challenges drawn afterwards. Prover and verifier
    must append exactly the same messages in exactly the same order.
    """

    def __init__(self, label, field):
        self.field = field
        self.state = hashlib.sha256(_as_bytes(label)).digest()
        self.n_rounds = 0

    def copy(self):
        t = Transcript.__new__(Transcript)
        t.field = self.field
        t.state = self.state
        t.n_rounds = self.n_rounds
        return t

    def _round_tag(self):
        return self.n_rounds.to_bytes(4, "big")

    def _absorb(self, payload):
        h = hashlib.sha256()
        h.update(self.state)
        h.update(self._round_tag())
        h.update(payload)
        self.state = h.digest()
        self.n_rounds += 1

    def _append_label(self, label):
        label = _as_bytes(label)
        self._absorb(len(label).to_bytes(4, "big") + label)

    def append_message(self, label, message):
        self._append_label(label)
        self._absorb(_as_bytes(message))

    def append_u64(self, label, x):
        if type(x) is not int or not 0 <= x <= U64_MAX:
            raise ValueError(f"{x!r} is not a u64")
        self._append_label(label)
        self._absorb(x.to_bytes(8, "big"))

    def append_scalar(self, label, scalar):
        if isinstance(scalar, int):
            scalar = self.field(scalar)
        self._append_label(label)
        self._absorb(scalar.to_bytes())

    def append_scalars(self, label, scalars):
        scalars = list(scalars)
        self.append_u64(label, len(scalars))
        for scalar in scalars:
            self.append_scalar(label, scalar)

    def challenge_bytes(self, n):
        out = b""
        while len(out) < n:
            h = hashlib.sha256()
            h.update(self.state)
            h.update(self._round_tag())
            self.state = h.digest()
            self.n_rounds += 1
            out += self.state
        return out[:n]

    def challenge_scalar(self):
        # draw 16 extra bytes so the reduction mod p is close to uniform
        data = self.challenge_bytes(self.field.byte_length + 16)
        return self.field(int.from_bytes(data, "big"))

    def challenge_vector(self, n):
        return [self.challenge_scalar() for _ in range(n)]

    def challenge_scalar_powers(self, n):
        q = self.challenge_scalar()
        out = [self.field.one()] * n
        for i in range(1, n):
            out[i] = out[i - 1] * q
        return out

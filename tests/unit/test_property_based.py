"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from fdbtuple import (
    BoolElement,
    BytesElement,
    CompleteVersionstamp,
    DoubleElement,
    FloatElement,
    IncompleteVersionstamp,
    IncompleteVersionstampElement,
    IntElement,
    NullElement,
    TextElement,
    TupleElement,
    UUIDElement,
    VersionstampElement,
    decode,
    encode,
    encode_for_versionstamped_mutation,
    encode_with_versionstamp_offset,
)

big_ints = st.integers(min_value=-(2**300), max_value=2**300)

versionstamps = st.builds(
    CompleteVersionstamp,
    transaction_version=st.integers(min_value=0, max_value=2**64 - 1),
    batch_number=st.integers(min_value=0, max_value=0xFFFF),
    user_version=st.integers(min_value=0, max_value=0xFFFF),
)

scalars = st.one_of(
    st.just(NullElement()),
    st.binary(max_size=32).map(lambda v: BytesElement(value=v)),
    st.text(max_size=16).map(lambda v: TextElement(value=v)),
    big_ints.map(lambda v: IntElement(value=v)),
    st.floats(width=32, allow_nan=False).map(lambda v: FloatElement(value=v)),
    st.floats(allow_nan=False).map(lambda v: DoubleElement(value=v)),
    st.booleans().map(lambda v: BoolElement(value=v)),
    st.uuids().map(lambda v: UUIDElement(value=v)),
    versionstamps.map(lambda v: VersionstampElement(value=v)),
)

elements = st.recursive(
    scalars,
    lambda children: st.lists(children, max_size=4).map(
        lambda items: TupleElement(elements=tuple(items))
    ),
    max_leaves=12,
)

tuples = st.lists(elements, max_size=6)


class TestRoundTrip:
    """decode(encode(t)) == t."""

    @given(t=tuples)
    def test_round_trip(self, t: list) -> None:
        """Every tuple without an incomplete versionstamp round-trips."""
        assert decode(encode(t)) == tuple(t)

    @given(payload=st.binary(max_size=64))
    def test_escaping(self, payload: bytes) -> None:
        """Payloads with embedded nulls never terminate early."""
        data = encode([BytesElement(value=payload), IntElement(value=1)])

        assert data.count(b"\x00") == payload.count(b"\x00") + 1
        assert decode(data) == (BytesElement(value=payload), IntElement(value=1))

    @given(t=tuples)
    def test_deterministic(self, t: list) -> None:
        """Encoding is a function of the value alone."""
        assert encode(t) == encode(list(t))


class TestOrderPreservation:
    """Byte order equals value order."""

    @given(a=big_ints, b=big_ints)
    def test_int_order(self, a: int, b: int) -> None:
        """Integers order correctly across zero and the 8-byte boundary."""
        ea = encode([IntElement(value=a)])
        eb = encode([IntElement(value=b)])

        assert (a < b) == (ea < eb)
        assert (a == b) == (ea == eb)

    @given(a=st.floats(allow_nan=False), b=st.floats(allow_nan=False))
    def test_double_order(self, a: float, b: float) -> None:
        """Doubles order correctly across the sign boundary."""
        if a < b:
            assert encode([DoubleElement(value=a)]) < encode([DoubleElement(value=b)])

    @given(
        a=st.floats(width=32, allow_nan=False),
        b=st.floats(width=32, allow_nan=False),
    )
    def test_float_order(self, a: float, b: float) -> None:
        """Floats order correctly across the sign boundary."""
        if a < b:
            assert encode([FloatElement(value=a)]) < encode([FloatElement(value=b)])

    @given(a=st.binary(max_size=16), b=st.binary(max_size=16))
    def test_bytes_order(self, a: bytes, b: bytes) -> None:
        """Byte strings order lexicographically, nulls included."""
        assert (a < b) == (encode([BytesElement(value=a)]) < encode([BytesElement(value=b)]))

    @given(a=st.text(max_size=8), b=st.text(max_size=8))
    def test_text_order(self, a: str, b: str) -> None:
        """Text orders by UTF-8 bytes."""
        assert (a.encode() < b.encode()) == (
            encode([TextElement(value=a)]) < encode([TextElement(value=b)])
        )

    @given(
        a=st.lists(st.integers(min_value=-(2**70), max_value=2**70), max_size=5),
        b=st.lists(st.integers(min_value=-(2**70), max_value=2**70), max_size=5),
    )
    def test_tuple_order(self, a: list, b: list) -> None:
        """Tuples of integers order lexicographically, top-level and nested."""
        ea = encode([IntElement(value=v) for v in a])
        eb = encode([IntElement(value=v) for v in b])
        na = encode([TupleElement(elements=tuple(IntElement(value=v) for v in a))])
        nb = encode([TupleElement(elements=tuple(IntElement(value=v) for v in b))])

        assert (a < b) == (ea < eb)
        assert (a < b) == (na < nb)

    @given(t=tuples, extra=elements)
    def test_prefix_sorts_first(self, t: list, extra) -> None:  # type: ignore[no-untyped-def]
        """A tuple sorts before every tuple it is a prefix of."""
        assert encode(t) < encode(t + [extra])


class TestVersionstampTrailer:
    """The mutation encoding appends a correct offset."""

    @given(
        before=tuples,
        after=tuples,
        user_version=st.integers(min_value=0, max_value=0xFFFF),
    )
    def test_trailer_offset(self, before: list, after: list, user_version: int) -> None:
        """The trailer holds the little-endian offset of the placeholder."""
        stamp = IncompleteVersionstampElement(
            value=IncompleteVersionstamp(user_version=user_version)
        )
        elements = before + [stamp] + after
        data = encode_for_versionstamped_mutation(elements)
        body, offset = encode_with_versionstamp_offset(elements)

        assert data == body + offset.to_bytes(2, "little")
        assert body[offset - 1] == 0x33
        assert body[offset : offset + 12] == stamp.value.to_bytes()

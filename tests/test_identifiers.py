"""Tests for annotation ID generation."""

from nafa_mvp.foundation.identifiers import AnnotationIdGenerator


class TestAnnotationIdGenerator:
    def test_id_is_prefixed_timestamp(self) -> None:
        gen = AnnotationIdGenerator()
        assert gen.next_id(1_700_000_000_000) == "ann-1700000000000"

    def test_same_millisecond_does_not_collide(self) -> None:
        gen = AnnotationIdGenerator()
        ids = [gen.next_id(5000) for _ in range(3)]
        assert ids == ["ann-5000", "ann-5001", "ann-5002"]

    def test_clock_going_backwards_stays_monotonic(self) -> None:
        gen = AnnotationIdGenerator()
        assert gen.next_id(9000) == "ann-9000"
        assert gen.next_id(8000) == "ann-9001"

    def test_custom_prefix(self) -> None:
        gen = AnnotationIdGenerator(prefix="note-")
        assert gen.prefix == "note-"
        assert gen.next_id(1) == "note-1"

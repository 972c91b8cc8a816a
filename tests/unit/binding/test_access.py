import pytest

from rfc822_like.binding.access import AccessState, DocumentAccess, RecordAccess
from rfc822_like.binding.visitors import DictVisitor
from rfc822_like.errors import BindingProtocolError
from rfc822_like.parsing.models import Field, Record


def _record(*pairs: tuple[str, str]) -> Record:
    return Record(
        fields=tuple(
            Field(key=k, value=v, line_number=i) for i, (k, v) in enumerate(pairs, start=1)
        )
    )


class TestRecordAccess:
    def test_walks_fields_in_order(self) -> None:
        access = RecordAccess(_record(("A", "1"), ("B", "2")))

        assert access.state is AccessState.START
        assert access.next_key() == "A"
        assert access.state is AccessState.EXPECTING_VALUE
        assert access.next_value() == "1"
        assert access.state is AccessState.EXPECTING_KEY
        assert access.next_key() == "B"
        assert access.line_number == 2
        assert access.next_value() == "2"
        assert access.next_key() is None
        assert access.state is AccessState.END

    def test_empty_record_ends_immediately(self) -> None:
        access = RecordAccess(Record(fields=()))
        assert access.next_key() is None

    def test_end_is_reported_once(self) -> None:
        access = RecordAccess(_record(("A", "1")))
        access.next_key()
        access.next_value()
        assert access.next_key() is None

        with pytest.raises(BindingProtocolError, match="after the end"):
            access.next_key()

    def test_value_without_key_raises(self) -> None:
        access = RecordAccess(_record(("A", "1")))
        with pytest.raises(BindingProtocolError, match="without a preceding key"):
            access.next_value()

    def test_key_before_value_was_read_raises(self) -> None:
        access = RecordAccess(_record(("A", "1"), ("B", "2")))
        access.next_key()
        with pytest.raises(BindingProtocolError, match="value of 'A'"):
            access.next_key()

    def test_value_cannot_be_read_twice(self) -> None:
        access = RecordAccess(_record(("A", "1")))
        access.next_key()
        access.next_value()
        with pytest.raises(BindingProtocolError):
            access.next_value()


class TestDocumentAccess:
    def test_presents_each_record_as_map(self) -> None:
        access = DocumentAccess(iter([_record(("A", "1")), _record(("A", "2"))]))
        visitor = DictVisitor()

        assert access.has_next()
        assert access.next_element(visitor) == {"A": "1"}
        assert access.next_element(visitor) == {"A": "2"}
        assert not access.has_next()
        assert access.index == 2

    def test_has_next_does_not_consume(self) -> None:
        access = DocumentAccess(iter([_record(("A", "1"))]))
        assert access.has_next()
        assert access.has_next()
        assert access.index == 0
        assert access.next_element(DictVisitor()) == {"A": "1"}

    def test_stays_exhausted(self) -> None:
        access = DocumentAccess(iter([]))
        assert not access.has_next()
        assert not access.has_next()

    def test_element_after_end_raises(self) -> None:
        access = DocumentAccess(iter([]))
        with pytest.raises(BindingProtocolError, match="after the end of the document"):
            access.next_element(DictVisitor())

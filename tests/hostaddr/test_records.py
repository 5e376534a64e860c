import pytest
from pydantic import ValidationError

from hostaddr.models.records import AddressFamily, AddressRecord, IPv4Record, IPv6Record, load_record
from hostaddr.services.dispatcher import parse_address


def test_records_are_frozen():
    record = IPv4Record.from_text("1.2.3.4")
    with pytest.raises(ValidationError):
        record.groups = (5, 6, 7, 8)


def test_with_groups_revalidates_and_resets_port():
    record = IPv4Record.from_text("1.2.3.4:80")
    replaced = record.with_groups([9, 9, 9, 9])
    assert replaced.groups == (9, 9, 9, 9)
    assert replaced.port == 80

    broken = record.with_groups([9, 9, 9, 300])
    assert broken.is_empty
    assert broken.port == 0
    assert record.groups == (1, 2, 3, 4)


def test_with_port_on_valid_and_invalid_records():
    record = IPv6Record.from_text("::1")
    assert record.with_port(8080).address_and_port == "[::1]:8080"
    assert record.with_port(-1).port == 0
    assert IPv6Record.from_text("nope").with_port(8080).port == 0


def test_non_integer_groups_are_rejected():
    assert IPv4Record.from_groups(["1", "2", "3", "4"]).is_empty
    assert IPv4Record.from_groups([1.0, 2, 3, 4]).is_empty
    assert IPv4Record.from_groups([True, 2, 3, 4]).is_empty
    assert IPv4Record.from_groups("1234").is_empty


def test_single_bad_hextet_empties_record():
    record = IPv6Record.from_groups([1, 2, 3, 4, 5, 6, 7, 65536], port=443)
    assert record.groups == ()
    assert record.port == 0
    assert record.family is AddressFamily.INVALID
    assert record.address == "::"


def test_invalid_record_defaults():
    assert IPv4Record().is_empty
    assert IPv6Record().address_and_port == "::"
    assert IPv6Record(padded=True).address == "0000:0000:0000:0000:0000:0000:0000:0000"


def test_load_record_picks_variant():
    ipv4 = IPv4Record.from_text("10.0.0.1:22")
    ipv6 = IPv6Record.from_text("[fe80::1]:22", padded=True)
    assert load_record(ipv4.model_dump()) == ipv4
    restored = load_record(ipv6.model_dump())
    assert isinstance(restored, IPv6Record)
    assert restored == ipv6
    assert restored.padded is True


def test_equality_is_by_value():
    assert IPv4Record.from_text("1.2.3.4") == IPv4Record.from_groups([1, 2, 3, 4])
    assert IPv4Record.from_text("1.2.3.4:80") != IPv4Record.from_text("1.2.3.4")
    assert IPv4Record() != IPv6Record()


def test_padding_is_not_part_of_identity():
    compressed = parse_address("::1", padded=False)
    padded = parse_address("::1", padded=True)
    assert compressed == padded
    assert hash(compressed) == hash(padded)
    assert compressed.address != padded.address
    assert len({compressed, padded}) == 1


def test_base_record_cannot_be_built():
    with pytest.raises(TypeError):
        AddressRecord(groups=(1, 2, 3, 4))

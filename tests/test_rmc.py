import pytest

from lvxkit.rmc import RMC_BUFFER_SIZE, RmcParser

CLASSIC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


def _nmea(body: str) -> str:
    checksum = 0
    for char in body:
        checksum ^= ord(char)
    return f"${body}*{checksum:02X}"


def test_classic_sentence_is_found():
    assert RmcParser().decode(CLASSIC.encode()) == [CLASSIC]


def test_feed_returns_only_on_last_byte():
    parser = RmcParser()
    data = CLASSIC.encode()
    assert all(parser.feed(b) is None for b in data[:-1])
    assert parser.feed(data[-1]) == CLASSIC


def test_garbage_around_sentence_is_ignored():
    stream = b"xx$GPGGA,junk\r\n" + CLASSIC.encode() + b"\r\n"
    assert RmcParser().decode(stream) == [CLASSIC]


def test_bad_checksum_yields_nothing():
    broken = CLASSIC[:-2] + "00"
    assert RmcParser().decode(broken.encode()) == []


def test_lowercase_checksum_accepted():
    lower = CLASSIC[:-2] + CLASSIC[-2:].lower()
    assert RmcParser().decode(lower.encode()) == [lower]


def test_gnrmc_header_accepted():
    sentence = _nmea("GNRMC,000001,A,0000.000,N,00000.000,E,0.0,0.0,010120,,")
    assert RmcParser().decode(sentence.encode()) == [sentence]


def test_other_headers_rejected():
    sentence = _nmea("GPGGA,000001,0000.000,N,00000.000,E,1,08,0.9,0.0,M,,,,")
    assert RmcParser().decode(sentence.encode()) == []


def test_two_sentences_in_one_chunk():
    second = _nmea("GNRMC,235959,A,0000.000,S,00000.000,W,1.0,2.0,311299,,")
    stream = (CLASSIC + "\r\n" + second + "\r\n").encode()
    assert RmcParser().decode(stream) == [CLASSIC, second]


def test_sentence_split_over_chunks():
    parser = RmcParser()
    data = CLASSIC.encode()
    first = parser.decode(data[:20])
    second = parser.decode(data[20:])
    assert first == []
    assert second == [CLASSIC]


def test_overlong_sentence_is_dropped_and_parser_recovers():
    long_sentence = _nmea("GPRMC," + "A" * RMC_BUFFER_SIZE)
    parser = RmcParser()
    assert parser.decode(long_sentence.encode()) == []
    assert parser.decode(CLASSIC.encode()) == [CLASSIC]


def test_clear_discards_partial_sentence():
    parser = RmcParser()
    data = CLASSIC.encode()
    parser.decode(data[:30])
    parser.clear()
    assert parser.decode(data[30:]) == []


def test_feed_rejects_non_byte():
    with pytest.raises(ValueError):
        RmcParser().feed(256)
from datetime import timedelta
from pathlib import Path

import pytest

from reqkit.options import (
    Bearer,
    Buffer,
    HttpVersion,
    HttpVersionCode,
    LimitRate,
    LowSpeed,
    MultiRange,
    Proxies,
    Range,
    ReserveSize,
    Timeout,
    UnixSocket,
    Verbose,
)


def test_bearer_keeps_token():
    assert Bearer("token").token == "token"


def test_buffer_from_bytes():
    buf = Buffer(b"content", "file.txt")
    assert buf.data == b"content"
    assert buf.filename == Path("file.txt")
    assert len(buf) == len(b"content")


def test_buffer_from_bytearray_is_copied():
    source = bytearray(b"abc")
    buf = Buffer(source, Path("a.bin"))
    source[0] = ord("z")
    assert buf.data == b"abc"


def test_buffer_rejects_text():
    with pytest.raises(TypeError):
        Buffer("text", "file.txt")


def test_buffer_rejects_wide_memoryview():
    with pytest.raises(TypeError):
        Buffer(memoryview(bytearray(8)).cast("I"), "file.bin")


def test_http_version_default():
    assert HttpVersion().code is HttpVersionCode.VERSION_NONE
    assert HttpVersion(HttpVersionCode.VERSION_2_0).code is HttpVersionCode.VERSION_2_0


def test_http_version_codes_ordered():
    values = [HttpVersion(code).code.value for code in HttpVersionCode]
    assert values == sorted(values)
    assert HttpVersion().code.value == 0


def test_limit_rate_and_low_speed_fields():
    rate = LimitRate(1024, 2048)
    assert (rate.downrate, rate.uprate) == (1024, 2048)
    speed = LowSpeed(1000, 5)
    assert (speed.limit, speed.time) == (1000, 5)


def test_reserve_size():
    assert ReserveSize(4096).size == 4096


def test_verbose_defaults_on():
    assert Verbose().verbose is True
    assert Verbose(False).verbose is False


def test_range_defaults():
    rng = Range()
    assert rng.resume_from == 0
    assert rng.finish_at == -1


def test_range_none_equals_default():
    assert Range(None, None) == Range()


def test_range_open_start_string():
    assert str(Range(None, None)) == "0-"


def test_range_bounded_string():
    assert str(Range(2, 3)) == "2-3"


def test_range_negative_values_are_omitted():
    assert str(Range(-5, -7)) == str(Range(-1, -1))
    assert str(Range(4, -2)).startswith(str(4))


def test_multirange_joins_ranges():
    ranges = [Range(None, 3), Range(5, 6)]
    text = str(MultiRange(*ranges))
    assert text.split(", ") == [str(item) for item in ranges]


def test_multirange_empty():
    assert str(MultiRange()) == ""


def test_proxies_lookup():
    proxies = Proxies({"http": "proxy.example.com:3128"})
    assert proxies.has("http")
    assert not proxies.has("https")
    assert proxies["http"] == "proxy.example.com:3128"
    assert proxies["https"] == ""


def test_unix_socket_string():
    assert str(UnixSocket("/tmp/app.sock")) == "/tmp/app.sock"


def test_timeout_from_int():
    assert Timeout(1500).milliseconds() == 1500


def test_timeout_from_timedelta():
    assert Timeout(timedelta(milliseconds=2500)).milliseconds() == 2500


def test_timeout_truncates_toward_zero():
    assert Timeout(timedelta(microseconds=1999)) == Timeout(timedelta(milliseconds=1))
    assert Timeout(timedelta(microseconds=-1500)) == Timeout(-1)


def test_timeout_limits():
    assert Timeout(2**63 - 1).milliseconds() == 2**63 - 1
    assert Timeout(-(2**63)).milliseconds() == -(2**63)


def test_timeout_overflow():
    with pytest.raises(OverflowError, match="overflow"):
        Timeout(2**63).milliseconds()


def test_timeout_underflow():
    with pytest.raises(OverflowError, match="underflow"):
        Timeout(-(2**63) - 1).milliseconds()


def test_timeout_rejects_other_types():
    with pytest.raises(TypeError):
        Timeout("100")
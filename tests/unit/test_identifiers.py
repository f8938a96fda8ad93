"""
Identifier Unit Tests
Tests for chainutil/crypto/identifiers.py
"""
import uuid

import pytest

from chainutil.crypto.identifiers import generate_uuid, is_uuid4
from chainutil.schemas.errors import ErrorCodes, RandomSourceException


class TestGenerateUuidShape:
    """Layout of generated identifiers."""

    def test_shape(self):
        for _ in range(200):
            value = generate_uuid()
            assert len(value) == 36
            assert value[14] == "4"
            assert value[19] in "89ab"
            assert value[:14].count("-") == 2
            assert [len(g) for g in value.split("-")] == [8, 4, 4, 4, 12]
            assert value == value.lower()
            assert is_uuid4(value)

    def test_parses_as_rfc4122_v4(self):
        parsed = uuid.UUID(generate_uuid())
        assert parsed.version == 4
        assert parsed.variant == uuid.RFC_4122

    @pytest.mark.slow
    def test_no_duplicates(self):
        values = {generate_uuid() for _ in range(10_000)}
        assert len(values) == 10_000


class TestGenerateUuidBits:
    """Bit manipulation on a fixed random source."""

    def test_all_ones(self):
        assert generate_uuid(lambda n: b"\xff" * n) == "ffffffff-ffff-4fff-bfff-ffffffffffff"

    def test_all_zeros(self):
        assert generate_uuid(lambda n: b"\x00" * n) == "00000000-0000-4000-8000-000000000000"

    def test_other_bytes_untouched(self):
        raw = bytes(range(16))
        value = generate_uuid(lambda n: raw)
        assert value == "00010203-0405-4607-8809-0a0b0c0d0e0f"

    def test_requests_sixteen_bytes(self):
        requested = []

        def source(n):
            requested.append(n)
            return b"\x11" * n

        generate_uuid(source)
        assert requested == [16]


class TestRandomSourceFailure:
    """Random-source failures are fatal and never degrade silently."""

    def test_oserror_is_fatal(self):
        def broken(n):
            raise OSError("entropy pool unavailable")

        with pytest.raises(RandomSourceException) as exc_info:
            generate_uuid(broken)

        err = exc_info.value
        assert err.fatal is True
        assert err.retryable is False
        assert err.code == ErrorCodes.RANDOM_SOURCE_UNAVAILABLE
        assert "entropy pool unavailable" in str(err)
        assert isinstance(err.__cause__, OSError)

    def test_not_implemented_is_fatal(self):
        def missing(n):
            raise NotImplementedError("no source")

        with pytest.raises(RandomSourceException):
            generate_uuid(missing)

    def test_short_read_is_fatal(self):
        with pytest.raises(RandomSourceException, match="short read"):
            generate_uuid(lambda n: b"\x00" * (n - 1))

    def test_error_model(self):
        def broken(n):
            raise OSError("boom")

        with pytest.raises(RandomSourceException) as exc_info:
            generate_uuid(broken)

        model = exc_info.value.to_error_model()
        assert model.fatal is True
        assert model.details["cause_type"] == "OSError"


class TestIsUuid4:

    def test_rejects_other_versions(self):
        assert not is_uuid4(str(uuid.uuid1()))
        assert not is_uuid4("ffffffff-ffff-4fff-cfff-ffffffffffff")
        assert not is_uuid4("FFFFFFFF-FFFF-4FFF-BFFF-FFFFFFFFFFFF")
        assert not is_uuid4("not-a-uuid")

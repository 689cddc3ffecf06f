"""Tests for the open string enum codec."""

from __future__ import annotations

import copy
import logging
import pickle

import pytest

from sdkmodels.codec import (
    DecodeError,
    EnumRegistry,
    OpenEnum,
    base64_text,
    identity,
    strip_whitespace,
)
from sdkmodels.models.iam import UpdateCredentialOptionStatus
from sdkmodels.models.rds import SetPostgresqlDbUserPwdRequestXLanguage

Status = UpdateCredentialOptionStatus


class Padded(OpenEnum, converter=strip_whitespace):
    ONE = "one"
    TWO = "two"


class Encoded(OpenEnum, converter=base64_text):
    ACTIVE = "active"


# ── Registry constants ──────────────────────────────────────────────


class TestRegistryConstants:
    def test_credential_status_values(self) -> None:
        assert Status.ACTIVE.value == "active"
        assert Status.INACTIVE.value == "inactive"

    def test_constants_are_family_instances(self) -> None:
        assert isinstance(Status.ACTIVE, Status)
        assert isinstance(Status.INACTIVE, Status)

    def test_constants_distinct(self) -> None:
        assert Status.ACTIVE != Status.INACTIVE

    def test_from_name(self) -> None:
        assert Status.from_name("ACTIVE") is Status.ACTIVE
        assert Status.from_name("INACTIVE") is Status.INACTIVE

    def test_from_name_is_stable(self) -> None:
        assert Status.from_name("ACTIVE") == Status.from_name("ACTIVE")

    def test_from_name_unknown(self) -> None:
        with pytest.raises(KeyError, match="NOPE"):
            Status.from_name("NOPE")

    def test_members_registry(self) -> None:
        reg = Status.members()
        assert isinstance(reg, EnumRegistry)
        assert reg.family == "UpdateCredentialOptionStatus"
        assert list(reg) == ["ACTIVE", "INACTIVE"]
        assert len(reg) == 2
        assert reg["ACTIVE"] is Status.ACTIVE

    def test_registry_is_read_only(self) -> None:
        reg = Status.members()
        with pytest.raises(TypeError):
            reg["PAUSED"] = Status("paused")  # type: ignore[index]

    def test_registry_name_of(self) -> None:
        reg = SetPostgresqlDbUserPwdRequestXLanguage.members()
        assert reg.name_of("zh-cn") == "ZH_CN"
        assert reg.name_of("fr-fr") is None

    def test_families_have_separate_registries(self) -> None:
        assert list(SetPostgresqlDbUserPwdRequestXLanguage.members()) == ["ZH_CN", "EN_US"]
        assert "ZH_CN" not in Status.members()

    def test_base_class_has_empty_registry(self) -> None:
        assert len(OpenEnum.members()) == 0

    def test_lowercase_attributes_are_not_constants(self) -> None:
        class Family(OpenEnum):
            KNOWN = "known"
            helper = "not a constant"

        assert list(Family.members()) == ["KNOWN"]
        assert Family.helper == "not a constant"

    def test_cannot_extend_family_with_members(self) -> None:
        with pytest.raises(TypeError, match="Cannot extend"):

            class Sub(Status):  # type: ignore[misc]
                PAUSED = "paused"

    def test_can_extend_family_without_members(self) -> None:
        class Trimmed(OpenEnum, converter=strip_whitespace):
            pass

        class Colour(Trimmed):
            RED = "red"

        assert Colour.decode('" red "') == Colour.RED


# ── Value semantics ─────────────────────────────────────────────────


class TestValueSemantics:
    def test_construct_with_any_string(self) -> None:
        assert Status("suspended").value == "suspended"

    def test_construct_rejects_non_string(self) -> None:
        with pytest.raises(TypeError, match="wraps a str"):
            Status(1)  # type: ignore[arg-type]

    def test_construct_rejects_lone_surrogate(self) -> None:
        with pytest.raises(ValueError, match="not valid unicode text"):
            Status("\ud800")

    def test_structural_equality(self) -> None:
        assert Status.decode(b'"active"') == Status.decode(b'"active"')
        assert Status("active") == Status.ACTIVE

    def test_case_sensitive(self) -> None:
        assert Status.decode(b'"active"') != Status.decode(b'"Active"')

    def test_different_families_never_equal(self) -> None:
        assert Status("en-us") != SetPostgresqlDbUserPwdRequestXLanguage.EN_US

    def test_not_equal_to_plain_string(self) -> None:
        assert Status.ACTIVE != "active"

    def test_hashable(self) -> None:
        assert len({Status.decode(b'"active"'), Status.ACTIVE, Status.INACTIVE}) == 2

    def test_immutable(self) -> None:
        member = Status("active")
        with pytest.raises(AttributeError, match="immutable"):
            member._value = "inactive"  # type: ignore[misc]
        with pytest.raises(AttributeError, match="immutable"):
            del member._value
        assert member.value == "active"

    def test_str_and_repr(self) -> None:
        assert str(Status.ACTIVE) == "active"
        assert repr(Status.ACTIVE) == "UpdateCredentialOptionStatus('active')"

    def test_is_known(self) -> None:
        assert Status.ACTIVE.is_known
        assert not Status("suspended").is_known

    def test_copy_and_pickle(self) -> None:
        assert copy.copy(Status.ACTIVE) == Status.ACTIVE
        assert copy.deepcopy(Status.ACTIVE) == Status.ACTIVE
        assert pickle.loads(pickle.dumps(Status.ACTIVE)) == Status.ACTIVE


# ── Encode ──────────────────────────────────────────────────────────


class TestEncode:
    def test_bare_json_string(self) -> None:
        assert Status.ACTIVE.encode() == b'"active"'

    def test_escapes_special_characters(self) -> None:
        assert Status('say "hi"\n').encode() == b'"say \\"hi\\"\\n"'

    def test_non_ascii_left_as_utf8(self) -> None:
        assert Status("中文").encode() == '"中文"'.encode()

    def test_idempotent(self) -> None:
        member = Status("some \\ value")
        assert member.encode() == member.encode()


# ── Decode ──────────────────────────────────────────────────────────


class TestDecode:
    @pytest.mark.parametrize(
        "value",
        [
            "",
            "active",
            'quote " inside',
            "back\\slash",
            "line\nbreak\ttab",
            "\x00control",
            "</script>",
            "unicode ü 中文 🚀",
        ],
    )
    def test_round_trip(self, value: str) -> None:
        assert Status.decode(Status(value).encode()) == Status(value)

    def test_accepts_str_input(self) -> None:
        assert Status.decode('"inactive"') == Status.INACTIVE

    def test_surrounding_whitespace_allowed(self) -> None:
        assert Status.decode(b' "active" \n') == Status.ACTIVE

    def test_unknown_value_tolerated(self) -> None:
        member = Status.decode(b'"some-future-value-not-in-registry"')
        assert member.value == "some-future-value-not-in-registry"
        assert all(member != known for known in Status.members().values())

    def test_unknown_value_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="sdkmodels")
        Status.decode(b'"paused"')
        assert "unregistered UpdateCredentialOptionStatus value 'paused'" in caplog.text

    @pytest.mark.parametrize("raw", [b"123", b"{}", b"[]", b"null", b"true", b"1.5"])
    def test_non_string_token(self, raw: bytes) -> None:
        with pytest.raises(DecodeError, match="expected a JSON string"):
            Status.decode(raw)

    @pytest.mark.parametrize("raw", [b'"unterminated', b"active", b'"a" "b"', b"", b"\xff"])
    def test_malformed_token(self, raw: bytes) -> None:
        with pytest.raises(DecodeError, match="malformed JSON string"):
            Status.decode(raw)

    def test_lone_surrogate_rejected(self) -> None:
        with pytest.raises(DecodeError, match="invalid unicode escape") as excinfo:
            Status.decode(b'"\\ud800"')
        assert excinfo.value.token == "\ud800"

    def test_valid_surrogate_pair_round_trips(self) -> None:
        member = Status.decode(b'"\\ud83d\\ude80"')
        assert member.value == "🚀"
        assert Status.decode(member.encode()) == member

    def test_converter_output_must_be_unicode_text(self) -> None:
        with pytest.raises(DecodeError, match="not valid unicode text"):
            Status.decode(b'"x"', converter=lambda raw: "\udfff")

    def test_error_carries_family_and_token(self) -> None:
        with pytest.raises(DecodeError) as excinfo:
            Status.decode(b"123")
        assert excinfo.value.family == "UpdateCredentialOptionStatus"
        assert excinfo.value.token == 123
        assert excinfo.value.reason == "expected a JSON string"
        assert not hasattr(excinfo.value, "field")

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Status.decode(b"{}")


# ── Converters ──────────────────────────────────────────────────────


class TestConverters:
    def test_family_converter_applied(self) -> None:
        assert Padded.decode(b'"  one "') == Padded.ONE

    def test_constants_are_not_converted(self) -> None:
        assert Padded(" one ") != Padded.ONE

    def test_call_converter_overrides_family(self) -> None:
        assert Padded.decode(b'" one "', converter=identity).value == " one "

    def test_default_converter_is_identity(self) -> None:
        assert Status.decode(b'" active "').value == " active "

    def test_base64_converter(self) -> None:
        assert Encoded.decode(b'"YWN0aXZl"') == Encoded.ACTIVE

    def test_base64_converter_rejects_garbage(self) -> None:
        with pytest.raises(DecodeError, match="invalid base64"):
            Encoded.decode(b'"!!not base64!!"')

    def test_failing_converter_chains_cause(self) -> None:
        def boom(raw: str) -> str:
            raise ValueError(f"cannot interpret {raw}")

        with pytest.raises(DecodeError, match="cannot interpret x") as excinfo:
            Status.decode(b'"x"', converter=boom)
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_converter_returning_non_string(self) -> None:
        with pytest.raises(DecodeError, match="did not return a string"):
            Status.decode(b'"x"', converter=lambda raw: 42)  # type: ignore[arg-type,return-value]

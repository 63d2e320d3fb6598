from pathlib import Path

import pytest
from procsys.error import AcquisitionError, InvalidField, MissingField, ParseError
from procsys.kernel import SemaphoreLimits


def test_semaphore_limits_tab_separated() -> None:
    # Note that the below string has tab characters in it.
    a = SemaphoreLimits.parse("32000\t1024000000\t500\t32000")
    b = SemaphoreLimits(
        max_per_set=32_000,
        max_total=1_024_000_000,
        max_ops_per_call=500,
        max_set_identifiers=32_000,
    )
    assert a == b


@pytest.mark.parametrize(
    "s",
    [
        "250 32000 32 128",
        "  250   32000\t\t32 128  ",
        "250\t32000 32\t128\n",
        "250 32000 32 128 999",
        "+250 32000 +32 128",
    ],
)
def test_semaphore_limits_whitespace(s: str) -> None:
    assert SemaphoreLimits.parse(s) == SemaphoreLimits(250, 32000, 32, 128)


def test_semaphore_limits_plus_sign() -> None:
    assert SemaphoreLimits.parse("1 2 +3 4") == SemaphoreLimits(1, 2, 3, 4)

    with pytest.raises(InvalidField) as e:
        SemaphoreLimits.parse("1 2 ++3 4")
    assert e.value.index == 3

    with pytest.raises(InvalidField) as e:
        SemaphoreLimits.parse("1 2 + 3")
    assert e.value.index == 3


def test_semaphore_limits_u64_bounds() -> None:
    x = SemaphoreLimits.parse("0 18446744073709551615 1 2")
    assert x.max_per_set == 0
    assert x.max_total == 2 ** 64 - 1

    with pytest.raises(InvalidField) as e:
        SemaphoreLimits.parse("0 18446744073709551616 1 2")
    assert e.value.index == 2


@pytest.mark.parametrize(
    "s, index",
    [
        ("", 1),
        ("   \t ", 1),
        ("1", 2),
        ("1 2", 3),
        ("1 2 3", 4),
        # Every field must be present before any is converted.
        ("1 string", 3),
    ],
)
def test_semaphore_limits_missing_field(s: str, index: int) -> None:
    with pytest.raises(MissingField) as e:
        SemaphoreLimits.parse(s)
    assert e.value.index == index
    assert str(e.value) == f"missing field {index}"


@pytest.mark.parametrize(
    "s, index, text",
    [
        ("1 string 500 3200", 2, "string"),
        ("x y z w", 1, "x"),
        ("-1 2 3 4", 1, "-1"),
        ("1 2 3 1_000", 4, "1_000"),
        ("1 2 3 4.0", 4, "4.0"),
        # Non-ASCII digits are rejected.
        ("1 2 3 \u0664", 4, "\u0664"),
    ],
)
def test_semaphore_limits_invalid_field(s: str, index: int, text: str) -> None:
    with pytest.raises(InvalidField) as e:
        SemaphoreLimits.parse(s)
    assert e.value.index == index
    assert e.value.text == text
    assert str(e.value).startswith(f"failed to parse field {index}")


def test_semaphore_limits_non_ascii_whitespace_is_not_a_separator() -> None:
    with pytest.raises(InvalidField) as e:
        SemaphoreLimits.parse("1\u00a02 3 4 5")
    assert e.value.index == 1


def test_semaphore_limits_roundtrip() -> None:
    for x in [SemaphoreLimits(32000, 1024000000, 500, 32000), SemaphoreLimits(0, 0, 0, 0)]:
        assert SemaphoreLimits.parse(x.to_str()) == x


def test_semaphore_limits_constructor_range() -> None:
    with pytest.raises(ValueError):
        SemaphoreLimits(-1, 0, 0, 0)
    with pytest.raises(ValueError):
        SemaphoreLimits(0, 0, 0, 2 ** 64)


def test_semaphore_limits_current_with_injected_reader() -> None:
    files = {"/proc/sys/kernel/sem": "32000\t1024000000\t500\t32000\n"}
    assert SemaphoreLimits.current(files.__getitem__) == SemaphoreLimits(32000, 1024000000, 500, 32000)


def test_semaphore_limits_current_errors_are_distinguishable() -> None:
    def denied(path: str) -> str:
        raise PermissionError(13, "Permission denied", path)

    with pytest.raises(AcquisitionError) as e1:
        SemaphoreLimits.current(denied)
    assert e1.value.path == "/proc/sys/kernel/sem"

    with pytest.raises(ParseError) as e2:
        SemaphoreLimits.current(lambda path: "1 string 500 3200\n")
    assert isinstance(e2.value, InvalidField)
    assert e2.value.path == "/proc/sys/kernel/sem"


@pytest.mark.skipif(not Path("/proc/sys/kernel/sem").exists(), reason="no procfs")
def test_semaphore_limits_current() -> None:
    SemaphoreLimits.current()

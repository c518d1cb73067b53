"""Test the sample type and filter configuration entities."""

import numpy as np
import pytest

from fixed_ema.domain.entities import FilterConfig, SampleType


class TestSampleType:
    """Test cases for SampleType."""

    @pytest.mark.parametrize(
        ("value", "bits"),
        [("int8", 8), (np.int16, 16), (np.dtype("int32"), 32), ("int64", 64)],
    )
    def test_resolve(self, value, bits: int) -> None:
        """Test that names, types and dtypes resolve to the same entity."""
        st = SampleType.resolve(value)

        assert st.bits == bits
        assert st.name == f"int{bits}"

    def test_resolve_is_idempotent(self) -> None:
        """Test that resolving a SampleType returns it unchanged."""
        st = SampleType.resolve("int16")

        assert SampleType.resolve(st) is st

    @pytest.mark.parametrize("value", ["uint8", "float64", bool, "not-a-type"])
    def test_resolve_rejects(self, value) -> None:
        """Test that only signed integer types are accepted."""
        with pytest.raises(ValueError):
            SampleType.resolve(value)

    def test_range(self) -> None:
        """Test min/max for a 16-bit type."""
        st = SampleType.resolve("int16")

        assert st.min == -32768
        assert st.max == 32767

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, 0), (127, 127), (128, -128), (-129, 127), (256, 0), (1600, 64), (-1, -1)],
    )
    def test_wrap_int8(self, value: int, expected: int) -> None:
        """Test two's complement wrap-around."""
        assert SampleType.resolve("int8").wrap(value) == expected

    def test_scalar(self) -> None:
        """Test conversion to a numpy scalar of the type."""
        value = SampleType.resolve("int16").scalar(-6)

        assert isinstance(value, np.int16)
        assert value == -6

    def test_str(self) -> None:
        """Test string form is the dtype name."""
        assert str(SampleType.resolve(np.int32)) == "int32"


class TestFilterConfig:
    """Test cases for FilterConfig."""

    def test_required_bits(self) -> None:
        """Test the M + 1 + 2K width rule."""
        config = FilterConfig(shift=4, sample_type=SampleType.resolve("int32"), input_bits=10)

        assert config.scale_bits == 8
        assert config.required_bits == 19

    def test_required_bits_unknown(self) -> None:
        """Test that the rule needs input_bits."""
        config = FilterConfig(shift=4, sample_type=SampleType.resolve("int32"))

        assert config.required_bits is None

    def test_is_frozen(self) -> None:
        """Test that configuration is immutable."""
        config = FilterConfig(shift=4, sample_type=SampleType.resolve("int32"))

        with pytest.raises(AttributeError):
            config.shift = 5

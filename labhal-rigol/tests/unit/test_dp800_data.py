"""Tests for the DP800 value objects."""

from __future__ import annotations

import pytest

from labhal_core.errors import (
    EmptyReply,
    FieldCountMismatch,
    FieldParseError,
    ParseError,
    UnknownEnumValue,
)
from labhal_rigol.dp800.data import ChannelRatings, ChannelSettings, OutputReading
from labhal_rigol.dp800.types import DP800Channel


class TestChannelRatings:
    """Tests for ChannelRatings."""

    def test_from_reply(self) -> None:
        ratings = ChannelRatings.from_reply("CH1:30V/3A")
        assert ratings == ChannelRatings(DP800Channel.CH1, 30.0, 3.0)

    def test_from_reply_negative_voltage(self) -> None:
        ratings = ChannelRatings.from_reply("CH3:-30V/2A")
        assert ratings.channel is DP800Channel.CH3
        assert ratings.max_voltage == -30.0

    def test_from_reply_fractional(self) -> None:
        ratings = ChannelRatings.from_reply("CH2:8.5V/1.5A\n")
        assert ratings.max_voltage == 8.5
        assert ratings.max_current == 1.5

    def test_empty(self) -> None:
        with pytest.raises(EmptyReply):
            ChannelRatings.from_reply("")

    def test_malformed(self) -> None:
        with pytest.raises(FieldParseError) as exc_info:
            ChannelRatings.from_reply("CH1 30V 3A")
        assert exc_info.value.index == 0

    def test_unknown_channel(self) -> None:
        with pytest.raises(UnknownEnumValue):
            ChannelRatings.from_reply("CH4:30V/3A")

    def test_render(self) -> None:
        assert ChannelRatings(DP800Channel.CH1, 30.0, 3.0).render() == "CH1: 30V 3A"
        assert str(ChannelRatings(DP800Channel.CH2, 8.5, 1.5)) == "CH2: 8.5V 1.5A"

    def test_render_does_not_round_trip(self) -> None:
        rendered = ChannelRatings(DP800Channel.CH1, 30.0, 3.0).render()
        with pytest.raises(ParseError):
            ChannelRatings.from_reply(rendered)
        assert "diagnostic" in (ChannelRatings.render.__doc__ or "").lower()


class TestChannelSettings:
    """Tests for ChannelSettings."""

    def test_from_reply(self) -> None:
        settings = ChannelSettings.from_reply("CH1:30V/3A,5.000,1.000")
        assert settings == ChannelSettings(
            channel=DP800Channel.CH1,
            voltage=5.0,
            current=1.0,
            max_voltage=30.0,
            max_current=3.0,
        )

    def test_parse_is_deterministic(self) -> None:
        reply = "CH2:30V/3A,1.2E+01,2.500"
        assert ChannelSettings.from_reply(reply) == ChannelSettings.from_reply(reply)

    def test_render(self) -> None:
        settings = ChannelSettings(
            channel=DP800Channel.CH1,
            voltage=5.0,
            current=1.0,
            max_voltage=30.0,
            max_current=3.0,
        )
        assert settings.render() == "CH1: 5V [30V MAX] 1A [3A MAX]"
        assert str(settings) == settings.render()

    def test_render_does_not_round_trip(self) -> None:
        settings = ChannelSettings(DP800Channel.CH1, 5.0, 1.0, 30.0, 3.0)
        with pytest.raises(ParseError):
            ChannelSettings.from_reply(settings.render())
        assert "diagnostic" in (ChannelSettings.render.__doc__ or "").lower()

    def test_too_few_fields(self) -> None:
        with pytest.raises(FieldCountMismatch) as exc_info:
            ChannelSettings.from_reply("CH1:30V/3A,5.000")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_bad_voltage(self) -> None:
        with pytest.raises(FieldParseError) as exc_info:
            ChannelSettings.from_reply("CH1:30V/3A,abc,1.000")
        assert exc_info.value.index == 1
        assert exc_info.value.raw == "abc"

    def test_empty(self) -> None:
        with pytest.raises(EmptyReply):
            ChannelSettings.from_reply("  ")


class TestOutputReading:
    """Tests for OutputReading."""

    def test_from_reply(self) -> None:
        assert OutputReading.from_reply("5.0000,1.0000,5.0000") == OutputReading(5.0, 1.0, 5.0)

    def test_scientific_notation(self) -> None:
        reading = OutputReading.from_reply("1.234E+01,2.5E-01,3.085E+00")
        assert reading.voltage == pytest.approx(12.34)
        assert reading.current == pytest.approx(0.25)

    def test_render(self) -> None:
        assert OutputReading(5.0, 1.0, 5.0).render() == "5V 1A 5W"

    def test_render_does_not_round_trip(self) -> None:
        with pytest.raises(ParseError):
            OutputReading.from_reply(OutputReading(5.0, 1.0, 5.0).render())
        assert "wire format" in (OutputReading.render.__doc__ or "")

    def test_wrong_field_count(self) -> None:
        with pytest.raises(FieldCountMismatch):
            OutputReading.from_reply("5.0,1.0")

    def test_frozen(self) -> None:
        reading = OutputReading(5.0, 1.0, 5.0)
        with pytest.raises(AttributeError):
            reading.voltage = 1.0  # type: ignore[misc]

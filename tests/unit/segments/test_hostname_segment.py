"""Unit tests for the hostname segment."""

from collections.abc import Callable

import pytest
from pytest_mock import MockerFixture

from promptr.segments import HostnameSegment, SegmentContext
from promptr.segments._hostname import os_sub_state

ContextFactory = Callable[..., SegmentContext]


@pytest.fixture(autouse=True)
def linux(mocker: MockerFixture) -> None:
    mocker.patch("promptr.segments._hostname.current_platform", return_value="linux")


class TestHostnameSegment:
    def test_strips_domain(self, make_context: ContextFactory) -> None:
        (fragment,) = HostnameSegment.from_config().compute(
            make_context(hostname="box.example.com")
        )

        assert fragment.text == "box"
        assert (fragment.fg, fragment.bg) == (250, 238)
        assert fragment.source == "Hostname"

    def test_show_domain(self, make_context: ContextFactory) -> None:
        segment = HostnameSegment.from_config({"show_domain": True})

        (fragment,) = segment.compute(make_context(hostname="box.example.com"))

        assert fragment.text == "box.example.com"

    def test_falls_back_to_hostname_variable(self, make_context: ContextFactory) -> None:
        (fragment,) = HostnameSegment.from_config().compute(make_context(HOSTNAME="other"))

        assert fragment.text == "other"

    def test_falls_back_to_system(
        self, make_context: ContextFactory, mocker: MockerFixture
    ) -> None:
        mocker.patch("socket.gethostname", return_value="sys.local")

        (fragment,) = HostnameSegment.from_config().compute(make_context())

        assert fragment.text == "sys"

    def test_os_indicator(self, make_context: ContextFactory) -> None:
        segment = HostnameSegment.from_config({"show_os_indicator": True})

        (fragment,) = segment.compute(make_context(hostname="box"))

        assert fragment.text == "box\U0001f427"

    def test_jail_indicator(
        self, make_context: ContextFactory, mocker: MockerFixture
    ) -> None:
        mocker.patch(
            "promptr.segments._hostname.current_platform", return_value="freebsd14"
        )
        mocker.patch("promptr.segments._hostname.is_jailed", return_value=True)

        (fragment,) = HostnameSegment.from_config().compute(make_context(hostname="jail1"))

        assert fragment.text == "jail1\U0001f510"

    def test_jail_check_skipped_off_freebsd(
        self, make_context: ContextFactory, mocker: MockerFixture
    ) -> None:
        jailed = mocker.patch("promptr.segments._hostname.is_jailed")

        HostnameSegment.from_config().compute(make_context(hostname="box"))

        jailed.assert_not_called()


class TestOsSubState:
    @pytest.mark.parametrize(
        ("platform", "expected"),
        [
            ("darwin", "macos"),
            ("linux", "linux"),
            ("freebsd14", "freebsd"),
            ("openbsd7", "openbsd"),
            ("win32", None),
        ],
    )
    def test_mapping(self, platform: str, expected: str | None) -> None:
        assert os_sub_state(platform) == expected

import pytest

from tests.helpers import FakeClock, build_pptx


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def two_paragraph_txt() -> bytes:
    return b"Intro paragraph.\n\nSecond paragraph here.\n\n"


@pytest.fixture()
def eight_paragraph_txt() -> bytes:
    return "\n\n".join(f"Paragraph number {i}." for i in range(1, 9)).encode()


@pytest.fixture()
def eleven_slide_pptx() -> bytes:
    return build_pptx([[f"Slide {n}", "body"] for n in range(1, 12)])

"""Shared test fixtures for srtparse."""

import pytest


def pytest_collection_modifyitems(items):
    """Auto-mark tests without integration or slow markers as unit tests."""
    for item in items:
        markers = {marker.name for marker in item.iter_markers()}
        if 'integration' not in markers and 'slow' not in markers:
            item.add_marker(pytest.mark.unit)


UNDERWORLD = (
    "1\n"
    "00:00:58,392 --> 00:01:02,563\n"
    "The war had all but ground to a halt\n"
    "in the blink of an eye.\n"
    "\n"
    "2\n"
    "00:01:04,565 --> 00:01:08,986\n"
    "Lucian, the most feared and ruthless\n"
    "leader ever to rule the Lycan clan...\n"
    "\n"
    "3\n"
    "00:01:09,070 --> 00:01:11,656\n"
    "...had finally been killed.\n"
    "\n"
    "652\n"
    "01:53:02,325 --> 01:53:06,162\n"
    "Soon, Marcus will take the throne.\n"
)


@pytest.fixture
def sample_srt():
    """Return SRT content with multi-line captions and a gap in positions."""
    return UNDERWORLD


@pytest.fixture
def sample_srt_file(tmp_path):
    """Create a sample SRT file for testing."""
    content = (
        "1\n"
        "00:00:01,000 --> 00:00:03,500\n"
        "Hello, world!\n"
        "\n"
        "2\n"
        "00:00:04,000 --> 00:00:06,000\n"
        "This is a test.\n"
        "\n"
    )
    path = tmp_path / 'test.srt'
    path.write_text(content, encoding='utf-8')
    return path


@pytest.fixture
def broken_srt_file(tmp_path):
    """Create an SRT file whose second subtitle has a bad time range."""
    content = (
        "1\n"
        "00:00:01,000 --> 00:00:03,500\n"
        "Hello, world!\n"
        "\n"
        "2\n"
        "00:00:04,000 -> 00:00:06,000\n"
        "This is a test.\n"
    )
    path = tmp_path / 'broken.srt'
    path.write_text(content, encoding='utf-8')
    return path

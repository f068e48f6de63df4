"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ejdict.schema import Dictionary, Entry

BLUE_MEAN = (
    "『青い』,あい色の / 青黒い / 《話》陰気な,憂うつな / "
    "〈U〉『青色』,あい色;青色の着物 / …'を'青色にする"
)


@pytest.fixture
def apple():
    return Entry(headwords=("apple",), meaning="『リンゴ』;リンゴの木")


@pytest.fixture
def sample_entries(apple):
    """The four entries used across lookup tests, in storage order."""
    return [
        apple,
        Entry(
            headwords=("apple butter",),
            meaning="リンゴジャム(リンゴに香料・砂糖を加えて煮つめたジャム)",
        ),
        Entry(headwords=("apple green",), meaning="澄んだ淡い緑色"),
        Entry(headwords=("blue",), meaning=BLUE_MEAN),
    ]


@pytest.fixture
def sample_dictionary(sample_entries):
    return Dictionary.from_entries(sample_entries)


@pytest.fixture
def sample_ejdict_content():
    """Sample EJDict text content."""
    return (
        "A,a\tエイ(英語アルファベットの第1字)\n"
        "apple\t『リンゴ』;リンゴの木\n"
        "apple butter\tリンゴジャム(リンゴに香料・砂糖を加えて煮つめたジャム)\n"
        "\n"
        "apple green\t澄んだ淡い緑色\n"
        f"blue\t{BLUE_MEAN}\n"
    )


@pytest.fixture
def dictionary_file(tmp_path, sample_dictionary):
    """Sample dictionary saved as JSON."""
    filepath = tmp_path / "ejdict.json"
    sample_dictionary.save(filepath)
    return filepath

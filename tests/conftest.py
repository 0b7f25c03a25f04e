import sys
from pathlib import Path
import importlib
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture()
def m():
    """Lazily import the main module for tests to avoid module-level import."""
    return importlib.import_module("main")


SAMPLE_TEXTS = [
    "a",
    "ab",
    "aaaa",
    "abracadabra",
    "Hello, World!",
    "the quick brown fox jumps over the lazy dog",
    "mississippi river\n\ttabs and newlines\n",
    "naïve café – 日本語 テキスト 🙂🙂",
    "".join(chr(c) for c in range(32, 127)),
]


@pytest.fixture(params=SAMPLE_TEXTS, ids=lambda t: repr(t[:12]))
def sample_text(request):
    """Non-empty texts with varied symbol distributions."""
    return request.param


@pytest.fixture()
def text_file(tmp_path: Path):
    """Write a small UTF-8 text file and return its path."""
    path = tmp_path / "input.txt"
    path.write_text("abracadabra\n", encoding="utf-8")
    return path


def is_prefix_free(codes):
    """Return ``True`` if no code is a prefix of another."""
    values = sorted(codes)
    # after sorting, a prefix always sits directly before a word it prefixes
    return all(
        not b.startswith(a) for a, b in zip(values, values[1:])
    )


@pytest.fixture()
def prefix_free_fn():
    """
    Fixture that provides the is_prefix_free helper without importing conftest.
    """
    return is_prefix_free

import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import assembly_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from assembly_toolkit.core.models import Connector, Section  # noqa: E402
from assembly_toolkit.generate.dictionary import Dictionary  # noqa: E402


# Common test fixtures
@pytest.fixture
def c1() -> Connector:
    """Connector shared by every piece of the two-piece lexicon."""
    return Connector("c1", "+")


@pytest.fixture
def two_piece_lexis(c1) -> Dictionary:
    """Lexicon {A: c1, B: c1} without weights."""
    lexis = Dictionary()
    lexis.add_section(Section.build("A", [c1]))
    lexis.add_section(Section.build("B", [c1]))
    return lexis


@pytest.fixture
def tmp_lexicon_path(tmp_path: Path) -> Path:
    """Path for a lexicon file inside the test's tmp dir."""
    return tmp_path / "lexis" / "dictionary.json"

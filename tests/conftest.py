import sys
from pathlib import Path

import pytest

# Add project root to sys.path for local package imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def write_log(tmp_path):
    """Write visit log lines to a file and return its path."""
    def _write(*lines, name='visits.log', terminator='\n'):
        path = tmp_path / name
        path.write_bytes(''.join(line + terminator for line in lines).encode('utf-8'))
        return path
    return _write

import os
import sys

import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from microcan.drawing import DrawingContext  # noqa: E402
from .utils import RecordingSurface  # noqa: E402


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def ctx(surface):
    context = DrawingContext(surface, (200, 100))
    surface.calls.clear()
    return context

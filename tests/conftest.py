"""Global pytest configuration for in-app analytics.

The module ensures the ``src`` tree is importable regardless of how the
repository is checked out, and isolates the process-wide analytics instance
between tests.
"""

import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path so tests run without an install
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from in_app_analytics import registry  # noqa: E402
from in_app_analytics.bridge import host_error_bridge  # noqa: E402
from in_app_analytics.delegates import MemoryDelegate  # noqa: E402
from in_app_analytics.dispatch import Analytics, AnalyticsConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_registry():
    """Start and finish every test without a configured instance."""

    registry.reset()
    saved = dict(host_error_bridge._registrations)
    yield
    registry.reset()
    host_error_bridge._registrations = saved


@pytest.fixture
def memory_delegate() -> MemoryDelegate:
    return MemoryDelegate()


@pytest.fixture
def analytics(memory_delegate: MemoryDelegate) -> Analytics:
    """Enabled instance forwarding to an in-memory delegate."""

    return Analytics(AnalyticsConfig(enabled=True, name="TEST", platform="test-os", delegate=memory_delegate))

"""
Pytest configuration file for test discovery and setup.

Puts src/ on sys.path so sashite_cell imports without an editable install.
"""

import sys
from pathlib import Path

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

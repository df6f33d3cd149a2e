import os
import sys

# Allow running the tests from a checkout without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

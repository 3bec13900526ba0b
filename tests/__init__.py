
import sys
from os import path

MAKEGEN_SRC_DIR = path.dirname(path.abspath(__file__))
MAKEGEN_SRC_DIR = path.normpath(path.join(MAKEGEN_SRC_DIR, path.pardir, 'src'))

if MAKEGEN_SRC_DIR not in sys.path:
    sys.path.insert(1, MAKEGEN_SRC_DIR)

# for test 'testLoadPyModule()'
something = 'qaz'

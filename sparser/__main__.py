# sparser/__main__.py
import sys

from .sparserc import main

sys.exit(main())

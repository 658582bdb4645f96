"""
All methods for manipulating and representing data in bitnets
"""

# data/__init__.py
from bitnets.data.encoding import *
